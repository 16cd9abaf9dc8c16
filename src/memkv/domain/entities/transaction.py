"""Transaction undo log.

A transaction is one nesting level: the ordered list of mutating
commands applied while it was the innermost open block. Rolling it back
undoes them last-applied first, which is what makes interleaved
overwrites of the same key come back correctly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from memkv.domain.entities.command import MutatingCommand, is_mutating, undo_command
from memkv.ports.outbound.key_value_store import KeyValueStore


@dataclass
class Transaction:
    """Undo log for a single transaction block."""

    commands: list[MutatingCommand] = field(default_factory=list)

    def add_command(self, cmd: MutatingCommand) -> None:
        """Append a mutating command to the log.

        Raises:
            ValueError: If the command does not change the store.
        """
        if not is_mutating(cmd):
            raise ValueError(f"{cmd.kind.value} does not mutate and cannot be logged")
        self.commands.append(cmd)

    def rollback(self, store: KeyValueStore) -> int:
        """Undo every logged command in reverse order.

        Returns:
            The number of commands undone.
        """
        for cmd in reversed(self.commands):
            undo_command(cmd, store)
        return len(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self) -> Iterator[MutatingCommand]:
        return iter(self.commands)
