"""Tests for key extraction over whole modules."""

import ast
import textwrap
from pathlib import Path

import pytest

from glossa.extractor import UsedKey, extract_file, extract_keys, extract_source

FILE = Path("src/app/views.py")


def _keys(source: str) -> list[str]:
    return [r.key for r in extract_source(textwrap.dedent(source), FILE)]


class TestNesting:
    """A call is found exactly once wherever it sits in the tree."""

    @pytest.mark.parametrize(
        "source",
        [
            'translate(t, "a.b.c")',
            'x = translate(t, "a.b.c")',
            'def f(t):\n    if t:\n        return translate(t, "a.b.c")',
            'for i in range(3):\n    while i:\n        print(translate(t, "a.b.c"))',
            'items = [1, [2, translate(t, "a.b.c")]]',
            'items = (1, *rest, translate(t, "a.b.c"))',
            'x = {"k": translate(t, "a.b.c")}',
            'x = -len(translate(t, "a.b.c"))',
            'x = "prefix" + translate(t, "a.b.c")',
            'x = translate(t, "a.b.c").upper()',
            'x = (translate(t, "a.b.c"),)[0]',
            'f = lambda t: translate(t, "a.b.c")',
            'assert ok, translate(t, "a.b.c")',
            'xs = [translate(t, "a.b.c") for _ in range(1)]',
            'msg = f"{translate(t, \'a.b.c\')}!"',
            '@decorate(translate(t, "a.b.c"))\ndef f(): pass',
            'def f(label=translate(t, "a.b.c")): pass',
            'class View:\n    title = translate(t, "a.b.c")',
            'with ctx(translate(t, "a.b.c")):\n    pass',
            'try:\n    pass\nexcept E:\n    log(translate(t, "a.b.c"))',
            'async def f():\n    await send(translate(t, "a.b.c"))',
            'x = y if c else translate(t, "a.b.c")',
            'x = a and translate(t, "a.b.c")',
            'record = replace(base, title=translate(t, "a.b.c"))',
        ],
    )
    def test_found_once(self, source: str) -> None:
        assert _keys(source) == ["a.b.c"]

    def test_match_subject_guard_and_arms(self) -> None:
        source = """
        match translate(t, "subject"):
            case "x" if translate(t, "guard") == y:
                show(translate(t, "arm.one"))
            case _:
                show(translate(t, "arm.other"))
        """
        assert _keys(source) == ["subject", "guard", "arm.one", "arm.other"]

    def test_translation_call_nested_in_translation_call(self) -> None:
        source = 'translate_with_params(t, "outer", {"n": translate(t, "inner")})'
        assert _keys(source) == ["outer", "inner"]

    def test_every_call_site_reported(self) -> None:
        source = """
        a = translate(t, "ui.save")
        b = translate(t, "ui.save")
        """
        assert _keys(source) == ["ui.save", "ui.save"]


class TestNoKeys:
    """Calls that must not contribute keys."""

    def test_variable_key(self) -> None:
        assert _keys("translate(t, key_name)") == []

    def test_unknown_function_with_literal(self) -> None:
        assert _keys('lookup(t, "ui.save")') == []

    def test_plain_string_literals(self) -> None:
        assert _keys('x = "ui.save"') == []


class TestRecords:
    """Test record contents and aliases."""

    def test_record_carries_file_and_line(self) -> None:
        records = extract_source('\n\nx = translate(t, "ui.save")\n', FILE)
        assert records == [UsedKey(key="ui.save", file=FILE, line=3)]

    def test_import_alias_within_file(self) -> None:
        source = """
        import glossa as g
        from glossa import translate_plural as tp

        g.translate(t, "one")
        tp(t, "two", 3)
        """
        assert _keys(source) == ["one", "two"]

    def test_extract_keys_on_parsed_tree(self) -> None:
        tree = ast.parse('translate(t, "k")')
        assert [r.key for r in extract_keys(tree, FILE)] == ["k"]


class TestFailures:
    """Unparseable or unreadable files contribute nothing."""

    def test_syntax_error(self) -> None:
        assert extract_source('def broken(:\n    translate(t, "k")', FILE) == []

    def test_null_bytes(self) -> None:
        assert extract_source('translate(t, "k")\x00', FILE) == []

    def test_missing_file(self, tmp_path: Path) -> None:
        assert extract_file(tmp_path / "gone.py") == []

    def test_undecodable_file(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.py"
        path.write_bytes(b'x = "\xff\xfe"\ntranslate(t, "k")\n')
        assert extract_file(path) == []

    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "ok.py"
        path.write_text('translate(t, "k")\n', encoding="utf-8")
        assert extract_file(path) == [UsedKey(key="k", file=path, line=1)]
