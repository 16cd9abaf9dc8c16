"""Transaction stack port for nested transaction blocks.

This inbound port defines the contract for the nested transaction
state machine:

    empty ──begin()──> depth 1 ──begin()──> depth 2 ...
      ^                  │                    │
      │              rollback()           rollback()
      │                  │                    │
      └──────────────────┘             back to depth 1
      ^
      └──────── commit() from any depth ──────┘

Rollback closes only the innermost block. Commit closes every block at
once and makes all their changes permanent.
"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from memkv.domain.entities.command import MutatingCommand


@dataclass
class TransactionStats:
    """Statistics for transaction monitoring."""

    depth: int
    begun_total: int
    committed_total: int
    rolled_back_total: int
    commands_undone_total: int


class TransactionStack(Protocol):
    """Protocol for the stack of open transactions.

    Operations on an empty stack:
        - add_command: silently ignored (the command is not undoable)
        - rollback / commit: raise NoTransactionError, nothing changes
    """

    @property
    @abstractmethod
    def depth(self) -> int:
        """Return the number of open transactions."""
        ...

    @property
    @abstractmethod
    def in_transaction(self) -> bool:
        """Return True if at least one transaction is open."""
        ...

    @abstractmethod
    def begin(self) -> None:
        """Open a new innermost transaction. Nesting is unbounded."""
        ...

    @abstractmethod
    def add_command(self, cmd: MutatingCommand) -> None:
        """Record a mutating command in the innermost transaction.

        Must be called before the command executes so that undo order
        matches application order.
        """
        ...

    @abstractmethod
    def rollback(self) -> int:
        """Undo and close the innermost transaction.

        Returns:
            The number of commands undone.

        Raises:
            NoTransactionError: If no transaction is open.
        """
        ...

    @abstractmethod
    def commit(self) -> None:
        """Close every open transaction, keeping their changes.

        Raises:
            NoTransactionError: If no transaction is open.
        """
        ...

    @abstractmethod
    def get_stats(self) -> TransactionStats:
        """Return transaction statistics."""
        ...
