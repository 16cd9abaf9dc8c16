"""In-memory key/value store backed by a dict.

Implements the KeyValueStore port. Nothing survives a restart; the
store lives for as long as the engine that owns it.
"""

from __future__ import annotations

from typing import Dict, Iterator

from memkv.domain.value_objects import PreImage


class InMemoryKeyValueStore:
    """Dict-backed implementation of the KeyValueStore port.

    Usage:
        store = InMemoryKeyValueStore()
        before = store.set("a", "10")   # PreImage(existed=False)
        store.get("a")                  # "10"
        store.count_equal("10")         # 1
    """

    def __init__(self, initial: Dict[str, str] | None = None) -> None:
        """Initialize the store.

        Args:
            initial: Optional mapping to seed the store with (copied).
        """
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> PreImage:
        before = self._pre_image(key)
        self._data[key] = value
        return before

    def unset(self, key: str) -> PreImage:
        before = self._pre_image(key)
        if before.existed:
            del self._data[key]
        return before

    def count_equal(self, value: str) -> int:
        return sum(1 for stored in self._data.values() if stored == value)

    def items(self) -> Iterator[tuple[str, str]]:
        """Iterate over (key, value) pairs in no particular order."""
        return iter(list(self._data.items()))

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"InMemoryKeyValueStore(keys={len(self._data)})"

    def _pre_image(self, key: str) -> PreImage:
        if key in self._data:
            return PreImage.of(self._data[key])
        return PreImage.absent()
