"""Shared CLI utilities - console, message helpers, tables."""

from __future__ import annotations

import json

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from glossa.logging.colors import (
    ERROR_RED,
    KEY_PURPLE,
    PATH_CYAN,
    SUCCESS_GREEN,
    WARN_YELLOW,
)

# Styled output only, never JSON
console = Console(highlight=False)


def print_json(data: object) -> None:
    """Print JSON to stdout without Rich formatting.

    Rich wraps long lines at terminal width, which would break parsing.
    """
    print(json.dumps(data, indent=2, default=str, ensure_ascii=False))


def success(message: str) -> None:
    console.print(f"[{SUCCESS_GREEN}]✓[/{SUCCESS_GREEN}] {message}")


def error(message: str) -> None:
    console.print(f"[{ERROR_RED}]✗[/{ERROR_RED}] {escape(message)}")


def warn(message: str) -> None:
    console.print(f"[{WARN_YELLOW}]![/{WARN_YELLOW}] {message}")


def info(message: str) -> None:
    console.print(f"[{PATH_CYAN}]→[/{PATH_CYAN}] {message}")


def hint(message: str) -> None:
    console.print(f"[{WARN_YELLOW}]Hint:[/{WARN_YELLOW}] {message}")


def format_key(key: str) -> str:
    return f"[{KEY_PURPLE}]{escape(key)}[/{KEY_PURPLE}]"


def format_location(path: str, line: int = 0) -> str:
    location = f"{path}:{line}" if line else path
    return f"[{PATH_CYAN}]{escape(location)}[/{PATH_CYAN}]"


def create_table(title: str | None = None, *columns: str) -> Table:
    """Create a table with just a header underline, first column highlighted."""
    table = Table(title=title, box=box.SIMPLE_HEAD, header_style=f"bold {PATH_CYAN}")
    for i, col in enumerate(columns):
        style = KEY_PURPLE if i == 0 else None
        justify = "right" if col.lower() in ("count", "keys", "line") else "left"
        table.add_column(col, style=style, justify=justify)
    return table
