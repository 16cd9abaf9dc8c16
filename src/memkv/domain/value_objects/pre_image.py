"""Pre-image value object captured by mutating commands.

A pre-image records the state of a single key immediately before a
mutation: whether the key existed and, if so, the value it held.
Undo restores exactly this state.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PreImage:
    """State of a key before a mutation.

    Attributes:
        existed: Whether the key was present in the store
        value: The previous value, or None when the key was absent

    Example:
        >>> PreImage.absent()
        PreImage(existed=False, value=None)
        >>> PreImage.of("10").value
        '10'
    """

    existed: bool
    value: str | None = None

    def __post_init__(self) -> None:
        """Validate that a value is present exactly when the key existed."""
        if self.existed and self.value is None:
            raise ValueError("an existing key must carry its previous value")
        if not self.existed and self.value is not None:
            raise ValueError("an absent key cannot carry a previous value")

    @classmethod
    def absent(cls) -> PreImage:
        """Pre-image of a key that did not exist."""
        return cls(existed=False)

    @classmethod
    def of(cls, value: str) -> PreImage:
        """Pre-image of a key that held ``value``."""
        return cls(existed=True, value=value)
