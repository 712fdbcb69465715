"""Per-locale translation store.

A small trie keyed by dotted-path segments. ``ui.button.save`` is stored
under ``("ui", "button", "save")``; a node may hold both a value and
children (``ui`` and ``ui.title`` can coexist).
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

KEY_SEPARATOR = "."


def split_key(key: str) -> tuple[str, ...]:
    return tuple(key.split(KEY_SEPARATOR))


def join_key(segments: tuple[str, ...] | list[str]) -> str:
    return KEY_SEPARATOR.join(segments)


@dataclass
class _Node:
    value: str | None = None
    children: dict[str, _Node] = field(default_factory=dict)


class TranslationStore:
    """Mapping from key paths to template strings.

    Parsers build a store with :meth:`insert`; everything downstream
    only reads it.
    """

    def __init__(self) -> None:
        self._root = _Node()
        self._size = 0

    @classmethod
    def from_flat(cls, mapping: Mapping[str, str]) -> TranslationStore:
        store = cls()
        for key, value in mapping.items():
            store.insert(split_key(key), value)
        return store

    def insert(self, path: tuple[str, ...], value: str) -> None:
        if not path:
            raise ValueError("translation key path must not be empty")
        node = self._root
        for segment in path:
            node = node.children.setdefault(segment, _Node())
        if node.value is None:
            self._size += 1
        node.value = value

    def get(self, path: tuple[str, ...] | str) -> str | None:
        if isinstance(path, str):
            path = split_key(path)
        node = self._root
        for segment in path:
            child = node.children.get(segment)
            if child is None:
                return None
            node = child
        return node.value

    def flatten(self) -> Iterator[tuple[tuple[str, ...], str]]:
        """Yield ``(segments, value)`` for every stored key, depth-first."""
        stack: list[tuple[tuple[str, ...], _Node]] = [((), self._root)]
        while stack:
            path, node = stack.pop()
            if node.value is not None and path:
                yield path, node.value
            for segment in reversed(node.children):
                stack.append(((*path, segment), node.children[segment]))

    def keys(self) -> list[str]:
        return [join_key(path) for path, _ in self.flatten()]

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __repr__(self) -> str:
        return f"TranslationStore(keys={self._size})"
