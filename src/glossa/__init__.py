"""Glossa - translation key scanner for Python projects.

Finds translation keys referenced by ``translate(t, "ui.save")``-style
calls and checks them against flat JSON, nested JSON or PO locale files.
"""

from glossa.errors import GlossaError
from glossa.extractor import UsedKey, extract_keys
from glossa.index import KeyIndex, build_key_index
from glossa.loader import LoadedTranslations, load_translations
from glossa.scanner import ScanResult, UnusedResult, run_scan, run_unused
from glossa.walker import collect_used_keys

__version__ = "0.1.0"
__all__ = [
    "GlossaError",
    "KeyIndex",
    "LoadedTranslations",
    "ScanResult",
    "UnusedResult",
    "UsedKey",
    "__version__",
    "build_key_index",
    "collect_used_keys",
    "extract_keys",
    "load_translations",
    "run_scan",
    "run_unused",
]
