"""Glossa color palette.

Shared by the CLI console styles and the log renderer so both
surfaces agree on what "missing" and "ok" look like.
"""

from __future__ import annotations

# =============================================================================
# Hex Colors (Rich markup)
# =============================================================================

KEY_PURPLE = "#e135ff"
PATH_CYAN = "#80ffea"
WARN_YELLOW = "#f1fa8c"
SUCCESS_GREEN = "#50fa7b"
ERROR_RED = "#ff6363"

# =============================================================================
# ANSI 24-bit Escape Codes (log renderer)
# =============================================================================

ANSI_KEY_PURPLE = "\033[38;2;225;53;255m"
ANSI_PATH_CYAN = "\033[38;2;128;255;234m"
ANSI_CORAL = "\033[38;2;255;106;193m"
ANSI_WARN_YELLOW = "\033[38;2;241;250;140m"
ANSI_SUCCESS_GREEN = "\033[38;2;80;250;123m"
ANSI_ERROR_RED = "\033[38;2;255;99;99m"
ANSI_DIM = "\033[38;2;85;85;102m"
ANSI_RESET = "\033[0m"

LEVEL_COLORS: dict[str, str] = {
    "debug": ANSI_DIM,
    "info": ANSI_PATH_CYAN,
    "warning": ANSI_WARN_YELLOW,
    "warn": ANSI_WARN_YELLOW,
    "error": ANSI_ERROR_RED,
    "critical": ANSI_KEY_PURPLE,
}
