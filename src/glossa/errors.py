"""Exceptions raised by glossa operations."""

from __future__ import annotations

from pathlib import Path


class GlossaError(Exception):
    """Base exception for all glossa errors."""

    def __init__(self, message: str, *, details: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigError(GlossaError):
    """Raised when project configuration cannot be read or is invalid."""


class TranslationLoadError(GlossaError):
    """Raised when a translation directory cannot be loaded."""


class NoTranslationsError(TranslationLoadError):
    """Raised when a translation directory holds no locale files."""

    def __init__(self, directory: Path) -> None:
        super().__init__(
            f"No translation files (*.json, *.po) found in {directory}",
            details={"directory": str(directory)},
        )


class LocaleError(TranslationLoadError):
    """Raised when a locale code is not a 2 or 5 character code."""

    def __init__(self, code: str, *, path: Path | None = None) -> None:
        where = f" (from file {path.name})" if path is not None else ""
        super().__init__(
            f"Invalid locale code '{code}'{where}: expected a 2 character language code "
            "like 'en' or a 5 character language-region code like 'en-US'",
            details={"code": code, "path": str(path) if path is not None else None},
        )


class TranslationFormatError(TranslationLoadError):
    """Raised when a translation file does not parse under a given format."""

    def __init__(self, format_name: str, reason: str, *, path: Path | None = None) -> None:
        where = f"{path}: " if path is not None else ""
        super().__init__(
            f"{where}not valid {format_name}: {reason}",
            details={"format": format_name, "path": str(path) if path is not None else None},
        )
        self.format_name = format_name
        self.path = path
        self.reason = reason

    def with_path(self, path: Path) -> TranslationFormatError:
        """Return a copy of this error attributed to ``path``."""
        return TranslationFormatError(self.format_name, self.reason, path=path)
