"""Tests for the flat JSON, nested JSON and PO parsers."""

import json

import pytest

from glossa.errors import TranslationFormatError
from glossa.formats import (
    TranslationFormat,
    parse_flat_json,
    parse_nested_json,
    parse_po,
)

PO_TEXT = """\
msgid ""
msgstr ""
"Content-Type: text/plain; charset=UTF-8\\n"

msgid "ui.button.save"
msgstr "Save"

msgid "cart.items"
msgid_plural "cart.items"
msgstr[0] "One item"
msgstr[1] "Many items"

#~ msgid "old.key"
#~ msgstr "Old"
"""


class TestFlatJson:
    """Test single-level dotted key maps."""

    def test_splits_dotted_keys(self) -> None:
        store = parse_flat_json(json.dumps({"ui.button.save": "Save", "title": "App"}))
        assert store.get(("ui", "button", "save")) == "Save"
        assert store.get("title") == "App"
        assert len(store) == 2

    def test_nested_object_rejected(self) -> None:
        with pytest.raises(TranslationFormatError) as exc:
            parse_flat_json(json.dumps({"ui": {"save": "Save"}}))
        assert exc.value.format_name == TranslationFormat.FLAT_JSON
        assert "'ui'" in exc.value.message

    def test_top_level_array_rejected(self) -> None:
        with pytest.raises(TranslationFormatError):
            parse_flat_json("[]")

    def test_invalid_json_rejected(self) -> None:
        with pytest.raises(TranslationFormatError):
            parse_flat_json("{not json")


class TestNestedJson:
    """Test arbitrarily deep objects."""

    def test_builds_paths_from_object_keys(self) -> None:
        store = parse_nested_json(
            json.dumps({"ui": {"button": {"save": "Save"}, "title": "App"}, "ok": "OK"})
        )
        assert sorted(store.keys()) == ["ok", "ui.button.save", "ui.title"]

    def test_accepts_flat_input(self) -> None:
        store = parse_nested_json(json.dumps({"ui.save": "Save"}))
        assert store.keys() == ["ui.save"]

    @pytest.mark.parametrize("value", [1, None, True, ["a"]])
    def test_non_string_leaf_rejected(self, value: object) -> None:
        with pytest.raises(TranslationFormatError) as exc:
            parse_nested_json(json.dumps({"ui": {"count": value}}))
        assert "ui.count" in exc.value.message


class TestPo:
    """Test gettext catalogs."""

    def test_entries(self) -> None:
        store = parse_po(PO_TEXT)
        assert store.get("ui.button.save") == "Save"
        assert store.get("cart.items") == "One item"

    def test_header_and_obsolete_skipped(self) -> None:
        store = parse_po(PO_TEXT)
        assert sorted(store.keys()) == ["cart.items", "ui.button.save"]

    def test_garbage_rejected(self) -> None:
        with pytest.raises(TranslationFormatError):
            parse_po('msgid "a"\nmsgstr "b"\nthis is not po\n')
