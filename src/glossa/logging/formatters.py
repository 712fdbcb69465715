"""Structlog renderer for glossa.

Produces pipe-separated output: timestamp | level | message key=value...
"""

from __future__ import annotations

import os
import sys
import traceback
from datetime import datetime
from typing import TYPE_CHECKING, Any

from glossa.logging.colors import (
    ANSI_CORAL,
    ANSI_DIM,
    ANSI_ERROR_RED,
    ANSI_RESET,
    ANSI_SUCCESS_GREEN,
    LEVEL_COLORS,
)

if TYPE_CHECKING:
    from structlog.typing import EventDict, WrappedLogger


class GlossaRenderer:
    """Render structlog events as single themed lines.

    Example:
        14:02:11 | debug | file skipped path=src/app/broken.py reason=SyntaxError
        14:02:11 | info  | scan complete files=42 used_keys=310
    """

    def __init__(self, colors: bool | None = None, max_exception_frames: int = 5) -> None:
        self.max_exception_frames = max_exception_frames

        if colors is None:
            force_color = os.environ.get("FORCE_COLOR", "")
            self.colors = sys.stderr.isatty() or force_color not in ("", "0", "false")
        else:
            self.colors = colors

    def __call__(
        self,
        logger: WrappedLogger,
        method_name: str,
        event_dict: EventDict,
    ) -> str:
        timestamp = event_dict.pop("timestamp", datetime.now().strftime("%H:%M:%S"))
        level = event_dict.pop("level", method_name).lower()
        event = str(event_dict.pop("event", ""))

        exc_info = event_dict.pop("exc_info", None)
        exception_str = self._format_exception(exc_info) if exc_info else ""

        kv_pairs = self._format_kv_pairs(event_dict)

        if self.colors:
            ts = f"{ANSI_DIM}{timestamp}{ANSI_RESET}"
            lvl_color = LEVEL_COLORS.get(level, LEVEL_COLORS["info"])
            lvl = f"{lvl_color}{level:<5}{ANSI_RESET}"
            kv = f"{ANSI_DIM}{kv_pairs}{ANSI_RESET}" if kv_pairs else ""
        else:
            ts = timestamp
            lvl = f"{level:<5}"
            kv = kv_pairs

        line = f"{ts} | {lvl} | {event}"
        if kv:
            line += f" {kv}"
        if exception_str:
            line += f"\n{exception_str}"
        return line

    def _format_kv_pairs(self, event_dict: EventDict) -> str:
        pairs = []
        for key, value in event_dict.items():
            if key.startswith("_"):
                continue
            if self.colors and isinstance(value, bool):
                color = ANSI_SUCCESS_GREEN if value else ANSI_ERROR_RED
                pairs.append(f"{key}={color}{value}{ANSI_RESET}")
            elif self.colors and isinstance(value, (int, float)):
                pairs.append(f"{key}={ANSI_CORAL}{value}{ANSI_RESET}")
            else:
                pairs.append(f"{key}={value}")
        return " ".join(pairs)

    def _format_exception(self, exc_info: tuple[Any, ...] | BaseException | bool) -> str:
        """Format an exception with at most ``max_exception_frames`` frames."""
        if exc_info is True:
            exc_info = sys.exc_info()
        elif isinstance(exc_info, BaseException):
            exc_info = (type(exc_info), exc_info, exc_info.__traceback__)

        if not exc_info or exc_info[0] is None:
            return ""

        exc_type, exc_value, exc_tb = exc_info

        tb_lines = traceback.format_tb(exc_tb)
        if len(tb_lines) > self.max_exception_frames:
            tb_lines = ["  ... (truncated)\n", *tb_lines[-self.max_exception_frames :]]

        indent = "         "
        formatted_tb = "".join(tb_lines).rstrip()
        formatted_tb = "\n".join(indent + line for line in formatted_tb.split("\n"))

        exc_name = exc_type.__name__
        if exc_type.__module__ and exc_type.__module__ != "builtins":
            exc_name = f"{exc_type.__module__}.{exc_name}"

        if self.colors:
            return (
                f"{indent}{ANSI_ERROR_RED}{exc_name}: {exc_value}{ANSI_RESET}\n"
                f"{ANSI_DIM}{formatted_tb}{ANSI_RESET}"
            )
        return f"{indent}{exc_name}: {exc_value}\n{formatted_tb}"
