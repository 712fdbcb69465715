"""The set of every declared translation key."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from glossa.loader import LoadedTranslations
from glossa.store import KEY_SEPARATOR, TranslationStore, join_key

# CLDR plural categories; translate_plural() resolves "items" to "items.one" etc.
PLURAL_CATEGORIES = frozenset({"zero", "one", "two", "few", "many", "other"})


class KeyIndex:
    """Union of the dotted keys declared by all loaded locales."""

    def __init__(self, keys: Iterable[str] = ()) -> None:
        self._keys = frozenset(keys)
        self._plural_parents = frozenset(
            key.rsplit(KEY_SEPARATOR, 1)[0]
            for key in self._keys
            if KEY_SEPARATOR in key and key.rsplit(KEY_SEPARATOR, 1)[1] in PLURAL_CATEGORIES
        )

    @classmethod
    def from_stores(cls, stores: Iterable[TranslationStore]) -> KeyIndex:
        return cls(join_key(path) for store in stores for path, _ in store.flatten())

    def covers(self, key: str) -> bool:
        """True if ``key`` is declared, directly or through its plural forms."""
        return key in self._keys or key in self._plural_parents

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return f"KeyIndex(keys={len(self._keys)})"


def build_key_index(loaded: LoadedTranslations) -> KeyIndex:
    return KeyIndex.from_stores(store for _, store in loaded.locales)


def is_plural_form_of(key: str, used: set[str] | frozenset[str]) -> bool:
    """True if ``key`` is ``<used key>.<plural category>``."""
    parent, sep, category = key.rpartition(KEY_SEPARATOR)
    return bool(sep) and category in PLURAL_CATEGORIES and parent in used
