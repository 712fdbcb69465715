"""Cross-check used keys against declared keys.

``run_scan`` answers "which keys does the code use that no locale
declares?" and ``run_unused`` the reverse. Both return result values;
mapping a result to an exit status is the command layer's job.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from glossa.errors import NoTranslationsError
from glossa.extractor import UsedKey
from glossa.formats import TranslationFormat
from glossa.index import KeyIndex, build_key_index, is_plural_form_of
from glossa.loader import load_translations
from glossa.logging import get_logger
from glossa.walker import DEFAULT_EXCLUDED_DIRS, collect_used_keys

log = get_logger(__name__)


@dataclass
class ScanResult:
    """Outcome of a used-but-undeclared check."""

    declared_count: int
    used_count: int
    missing: list[UsedKey] = field(default_factory=list)
    files_scanned: int = 0
    format: TranslationFormat | None = None
    locales: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.missing


@dataclass
class UnusedResult:
    """Outcome of a declared-but-unused check."""

    declared_count: int
    used_count: int
    unused: list[str] = field(default_factory=list)
    files_scanned: int = 0
    format: TranslationFormat | None = None
    locales: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.unused


def find_missing(index: KeyIndex, used: Iterable[UsedKey]) -> list[UsedKey]:
    """Every record whose key the index does not declare, one per occurrence."""
    return [record for record in used if not index.covers(record.key)]


def find_unused(index: KeyIndex, used: Iterable[UsedKey]) -> list[str]:
    """Declared keys that no call site references, sorted."""
    used_keys = frozenset(record.key for record in used)
    return sorted(
        key for key in index if key not in used_keys and not is_plural_form_of(key, used_keys)
    )


def run_scan(
    source_root: Path,
    translations_dir: Path,
    exclude: Iterable[str] = DEFAULT_EXCLUDED_DIRS,
) -> ScanResult:
    """Report used keys missing from every locale in ``translations_dir``.

    A project with no translation files passes only when it also uses no
    keys; otherwise :class:`NoTranslationsError` propagates.

    Progress is logged through structlog. Without a prior
    :func:`glossa.logging.configure_logging` call, structlog's defaults print
    debug and info events to stdout; library callers that need a clean
    stdout should configure logging first.
    """
    used, files_scanned = collect_used_keys(source_root, exclude)
    try:
        loaded = load_translations(translations_dir)
    except NoTranslationsError:
        if used:
            raise
        log.info("nothing to check", source_root=str(source_root))
        return ScanResult(declared_count=0, used_count=0, files_scanned=files_scanned)

    index = build_key_index(loaded)
    missing = find_missing(index, used)
    log.info(
        "scan complete",
        files=files_scanned,
        declared=len(index),
        used=len(used),
        missing=len(missing),
    )
    return ScanResult(
        declared_count=len(index),
        used_count=len(used),
        missing=missing,
        files_scanned=files_scanned,
        format=loaded.format,
        locales=loaded.locale_codes,
    )


def run_unused(
    source_root: Path,
    translations_dir: Path,
    exclude: Iterable[str] = DEFAULT_EXCLUDED_DIRS,
) -> UnusedResult:
    """Report declared keys that no source file references.

    Logs like :func:`run_scan`; configure logging first to keep stdout clean.
    """
    loaded = load_translations(translations_dir)
    index = build_key_index(loaded)
    used, files_scanned = collect_used_keys(source_root, exclude)
    unused = find_unused(index, used)
    log.info("unused check complete", declared=len(index), used=len(used), unused=len(unused))
    return UnusedResult(
        declared_count=len(index),
        used_count=len(used),
        unused=unused,
        files_scanned=files_scanned,
        format=loaded.format,
        locales=loaded.locale_codes,
    )
