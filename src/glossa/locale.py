"""Locale codes derived from translation file names."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from glossa.errors import LocaleError


@dataclass(frozen=True, order=True)
class Locale:
    """A language (``en``) or language-region (``en_US``) code.

    Region codes are stored with ``_`` as the separator regardless of
    whether the file name used ``-`` or ``_``.
    """

    code: str

    @classmethod
    def parse(cls, raw: str, *, path: Path | None = None) -> Locale:
        code = raw.strip().replace("-", "_")
        if len(code) not in (2, 5):
            raise LocaleError(raw, path=path)
        return cls(code)

    @classmethod
    def from_path(cls, path: Path) -> Locale:
        """Derive the locale from a file name, dropping the format extension."""
        return cls.parse(path.stem, path=path)

    def __str__(self) -> str:
        return self.code
