"""Recognize calls into the translation API and pull out their key.

Every translation function takes the translator first and the key second::

    translate(t, "ui.button.save")
    glossa.translate_plural(t, "cart.items", count)
    translate_with_params(t, key="greeting", params=params)

Only string literals are extracted. A computed key yields nothing.
"""

from __future__ import annotations

import ast
from dataclasses import dataclass, field

TRANSLATION_MODULE = "glossa"

TRANSLATION_FUNCTIONS: frozenset[str] = frozenset(
    {
        "translate",
        "translate_with_params",
        "translate_with_context",
        "translate_with_context_and_params",
        "translate_plural",
        "translate_plural_with_params",
        "translate_cardinal",
        "translate_ordinal",
        "translate_range",
    }
)

KEY_ARG_INDEX = 1
KEY_KEYWORD = "key"


@dataclass
class ImportAliases:
    """Local names bound to the translation module or its functions."""

    modules: set[str] = field(default_factory=lambda: {TRANSLATION_MODULE})
    functions: dict[str, str] = field(default_factory=dict)

    def record_import(self, node: ast.Import) -> None:
        for alias in node.names:
            if alias.name == TRANSLATION_MODULE and alias.asname:
                self.modules.add(alias.asname)

    def record_import_from(self, node: ast.ImportFrom) -> None:
        if node.module != TRANSLATION_MODULE or node.level:
            return
        for alias in node.names:
            if alias.name in TRANSLATION_FUNCTIONS:
                self.functions[alias.asname or alias.name] = alias.name


def is_translation_callee(func: ast.expr, aliases: ImportAliases | None = None) -> bool:
    """Bare ``translate`` or qualified ``glossa.translate`` (or an alias of either)."""
    if isinstance(func, ast.Name):
        if func.id in TRANSLATION_FUNCTIONS:
            return True
        return aliases is not None and func.id in aliases.functions

    if isinstance(func, ast.Attribute) and isinstance(func.value, ast.Name):
        modules = aliases.modules if aliases is not None else {TRANSLATION_MODULE}
        return func.value.id in modules and func.attr in TRANSLATION_FUNCTIONS

    return False


def key_argument(call: ast.Call) -> ast.expr | None:
    """The expression passed in the key position, positional or ``key=``."""
    if len(call.args) > KEY_ARG_INDEX:
        return call.args[KEY_ARG_INDEX]
    for keyword in call.keywords:
        if keyword.arg == KEY_KEYWORD:
            return keyword.value
    return None


def literal_string(node: ast.expr | None) -> str | None:
    if isinstance(node, ast.Constant) and isinstance(node.value, str):
        return node.value
    return None


def match_translation_call(call: ast.Call, aliases: ImportAliases | None = None) -> str | None:
    """Return the literal key of a translation call, or None."""
    if not is_translation_callee(call.func, aliases):
        return None
    return literal_string(key_argument(call))
