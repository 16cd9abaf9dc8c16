"""Key/value store port for the mapping under management.

This outbound port defines the contract for the storage that commands
run against. Keys and values are opaque strings; an absent key is a
distinct state and is never represented by the empty string.

Mutating operations return the key's pre-image so that the caller can
build an undo record without a separate read.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol

from memkv.domain.value_objects import PreImage


class KeyValueStore(Protocol):
    """Protocol for the string to string mapping.

    Thread Safety:
        Implementations are not required to be thread-safe. The engine
        serializes every command that touches the store.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value for a key.

        Args:
            key: The key to look up.

        Returns:
            The stored value, or None if the key is absent.
        """
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> PreImage:
        """Insert or overwrite a key.

        Args:
            key: The key to write.
            value: The new value.

        Returns:
            The key's state before the write.
        """
        ...

    @abstractmethod
    def unset(self, key: str) -> PreImage:
        """Remove a key if it is present.

        Removing an absent key is a no-op that still reports
        ``existed=False``.

        Args:
            key: The key to remove.

        Returns:
            The key's state before the removal.
        """
        ...

    @abstractmethod
    def count_equal(self, value: str) -> int:
        """Count the keys currently mapped to exactly ``value``."""
        ...

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of keys in the store."""
        ...

    @abstractmethod
    def __contains__(self, key: object) -> bool:
        """Return True if the key is present."""
        ...
