"""Extract used translation keys from Python source."""

from __future__ import annotations

import ast
from dataclasses import dataclass
from pathlib import Path

from glossa.logging import get_logger
from glossa.matcher import ImportAliases, match_translation_call

log = get_logger(__name__)


@dataclass(frozen=True)
class UsedKey:
    """One call site referencing a translation key."""

    key: str
    file: Path
    line: int = 0


class KeyCollector(ast.NodeVisitor):
    """Collect literal keys from translation calls anywhere in a module.

    ``generic_visit`` walks every field of every node, so calls nested in
    match arms, lambdas, comprehensions, f-strings, decorators, default
    arguments or assert messages are all reached.
    """

    def __init__(self, file_path: Path) -> None:
        self.file_path = file_path
        self.aliases = ImportAliases()
        self.records: list[UsedKey] = []

    def visit_Import(self, node: ast.Import) -> None:  # noqa: N802 (ast API)
        self.aliases.record_import(node)

    def visit_ImportFrom(self, node: ast.ImportFrom) -> None:  # noqa: N802 (ast API)
        self.aliases.record_import_from(node)

    def visit_Call(self, node: ast.Call) -> None:  # noqa: N802 (ast API)
        key = match_translation_call(node, self.aliases)
        if key is not None:
            self.records.append(UsedKey(key=key, file=self.file_path, line=node.lineno))
        self.generic_visit(node)


def extract_keys(tree: ast.AST, file_path: Path) -> list[UsedKey]:
    collector = KeyCollector(file_path)
    collector.visit(tree)
    return collector.records


def extract_source(source: str, file_path: Path) -> list[UsedKey]:
    """Parse ``source`` and extract its keys; unparseable source yields none."""
    try:
        tree = ast.parse(source, filename=str(file_path))
    except (SyntaxError, ValueError) as e:
        log.debug("file skipped", path=str(file_path), reason=type(e).__name__)
        return []
    return extract_keys(tree, file_path)


def extract_file(path: Path) -> list[UsedKey]:
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        log.debug("file skipped", path=str(path), reason=type(e).__name__)
        return []
    return extract_source(source, path)
