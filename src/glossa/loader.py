"""Load every locale file in a translation directory.

The format is detected per directory, not per file: the loader tries flat
JSON, then nested JSON, then PO, and keeps the first format under which
*every* file parses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from glossa.errors import NoTranslationsError, TranslationFormatError, TranslationLoadError
from glossa.formats import PARSERS, TranslationFormat
from glossa.locale import Locale
from glossa.logging import get_logger
from glossa.store import TranslationStore

log = get_logger(__name__)

JSON_CASCADE: tuple[TranslationFormat, ...] = (
    TranslationFormat.FLAT_JSON,
    TranslationFormat.NESTED_JSON,
)


@dataclass
class LoadedTranslations:
    """Every locale of one translation directory, parsed under one format."""

    format: TranslationFormat
    locales: list[tuple[Locale, TranslationStore]] = field(default_factory=list)

    @property
    def locale_codes(self) -> list[str]:
        return [locale.code for locale, _ in self.locales]


def discover_locale_files(directory: Path) -> tuple[list[Path], list[Path]]:
    """Return ``(json_files, po_files)`` directly inside ``directory``."""
    if not directory.is_dir():
        return [], []
    json_files = sorted(p for p in directory.glob("*.json") if p.is_file())
    po_files = sorted(p for p in directory.glob("*.po") if p.is_file())
    return json_files, po_files


def _locales_for(files: list[Path]) -> list[Locale]:
    # Validated up front: a bad file name aborts the load under every format.
    return [Locale.from_path(path) for path in files]


def parse_file_set(
    files: list[Path],
    locales: list[Locale],
    fmt: TranslationFormat,
) -> list[tuple[Locale, TranslationStore]]:
    """Parse every file under ``fmt``; the first failure fails the set."""
    parsed: list[tuple[Locale, TranslationStore]] = []
    for path, locale in zip(files, locales, strict=True):
        try:
            text = path.read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as e:
            raise TranslationFormatError(fmt, f"not UTF-8 ({e})", path=path) from e
        except OSError as e:
            raise TranslationLoadError(
                f"Cannot read translation file {path}: {e}", details={"path": str(path)}
            ) from e
        try:
            store = PARSERS[fmt](text)
        except TranslationFormatError as e:
            raise e.with_path(path) from e
        parsed.append((locale, store))
    return parsed


def load_translations(directory: Path) -> LoadedTranslations:
    """Load a translation directory, detecting its format.

    Raises:
        NoTranslationsError: the directory has no ``*.json`` or ``*.po`` files.
        LocaleError: a file name is not a valid locale code.
        TranslationFormatError: no format parses the whole file set. The
            nested-JSON error is preferred over the flat-JSON one.
    """
    json_files, po_files = discover_locale_files(directory)
    if not json_files and not po_files:
        raise NoTranslationsError(directory)

    json_locales = _locales_for(json_files)
    po_locales = _locales_for(po_files)

    attempts: list[tuple[TranslationFormat, list[Path], list[Locale]]] = []
    if json_files:
        attempts.extend((fmt, json_files, json_locales) for fmt in JSON_CASCADE)
    if po_files:
        attempts.append((TranslationFormat.PO, po_files, po_locales))

    errors: dict[TranslationFormat, TranslationFormatError] = {}
    for fmt, files, file_locales in attempts:
        try:
            locales = parse_file_set(files, file_locales, fmt)
        except TranslationFormatError as e:
            log.debug("format failed", format=str(fmt), path=str(e.path), reason=e.reason)
            errors[fmt] = e
            continue

        log.debug(
            "translations loaded",
            format=str(fmt),
            directory=str(directory),
            locales=len(locales),
        )
        return LoadedTranslations(format=fmt, locales=locales)

    for preferred in (
        TranslationFormat.NESTED_JSON,
        TranslationFormat.FLAT_JSON,
        TranslationFormat.PO,
    ):
        if preferred in errors:
            raise errors[preferred]
    raise AssertionError("format cascade finished without a result or an error")
