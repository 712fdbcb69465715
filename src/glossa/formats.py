"""Translation file parsers.

Each parser is a pure function from file text to a :class:`TranslationStore`
and raises :class:`TranslationFormatError` when the text is not in its
format. The loader decides which parser to try and in what order.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from enum import StrEnum
from typing import Any

import polib

from glossa.errors import TranslationFormatError
from glossa.store import TranslationStore, split_key


class TranslationFormat(StrEnum):
    """On-disk serializations understood by the loader."""

    FLAT_JSON = "flat-json"
    NESTED_JSON = "nested-json"
    PO = "po"


Parser = Callable[[str], TranslationStore]


def _load_json_object(text: str, format_name: str) -> dict[str, Any]:
    try:
        data = json.loads(text)
    except ValueError as e:
        raise TranslationFormatError(format_name, f"invalid JSON ({e})") from e
    if not isinstance(data, dict):
        raise TranslationFormatError(
            format_name, f"top level must be an object, got {type(data).__name__}"
        )
    return data


def parse_flat_json(text: str) -> TranslationStore:
    """Parse ``{"ui.button.save": "Save", ...}``."""
    data = _load_json_object(text, TranslationFormat.FLAT_JSON)
    store = TranslationStore()
    for key, value in data.items():
        if not isinstance(value, str):
            raise TranslationFormatError(
                TranslationFormat.FLAT_JSON,
                f"value of '{key}' must be a string, got {type(value).__name__}",
            )
        store.insert(split_key(key), value)
    return store


def parse_nested_json(text: str) -> TranslationStore:
    """Parse ``{"ui": {"button": {"save": "Save"}}}``.

    The key path is the chain of object keys from the root to each
    string leaf.
    """
    data = _load_json_object(text, TranslationFormat.NESTED_JSON)
    store = TranslationStore()
    stack: list[tuple[tuple[str, ...], dict[str, Any]]] = [((), data)]
    while stack:
        prefix, obj = stack.pop()
        for key, value in obj.items():
            path = (*prefix, key)
            if isinstance(value, str):
                store.insert(path, value)
            elif isinstance(value, dict):
                stack.append((path, value))
            else:
                raise TranslationFormatError(
                    TranslationFormat.NESTED_JSON,
                    f"value at '{'.'.join(path)}' must be a string or object, "
                    f"got {type(value).__name__}",
                )
    return store


def parse_po(text: str) -> TranslationStore:
    """Parse gettext ``msgid``/``msgstr`` pairs.

    ``msgid`` is the dotted key. Plural entries use the first plural form.
    The header and obsolete entries are ignored.
    """
    try:
        catalog = polib.pofile(text)
    except (OSError, ValueError) as e:
        raise TranslationFormatError(TranslationFormat.PO, str(e)) from e

    store = TranslationStore()
    for entry in catalog:
        if entry.obsolete or not entry.msgid:
            continue
        value = entry.msgstr
        if entry.msgid_plural and entry.msgstr_plural:
            value = entry.msgstr_plural.get(0, "")
        store.insert(split_key(entry.msgid), value)
    return store


PARSERS: dict[TranslationFormat, Parser] = {
    TranslationFormat.FLAT_JSON: parse_flat_json,
    TranslationFormat.NESTED_JSON: parse_nested_json,
    TranslationFormat.PO: parse_po,
}
