"""Nested transaction stack.

This module implements the transaction state machine that sits between
the command dispatcher and the store:

- begin() pushes an empty undo log
- add_command() appends to the innermost log (ignored when none is open)
- rollback() pops the innermost log and undoes it in reverse
- commit() drops every log at once; nothing is replayed

Undo by pre-image is enough here: every command touches one key, and
nested blocks only ever unwind in LIFO order.
"""

from __future__ import annotations

from memkv.domain.entities.command import MutatingCommand
from memkv.domain.entities.transaction import Transaction
from memkv.domain.value_objects import NoTransactionError
from memkv.ports.inbound.transaction_stack import TransactionStats
from memkv.ports.outbound.key_value_store import KeyValueStore


class NestedTransactionStack:
    """LIFO stack of open transactions over a single store.

    Usage:
        stack = NestedTransactionStack(store)
        stack.begin()
        cmd = SetCommand("a", "10")
        stack.add_command(cmd)
        execute_command(cmd, store)
        stack.rollback()            # "a" is back to its previous state

    Thread Safety:
        Not thread-safe. Callers serialize access (the engine holds a
        single lock around every command).
    """

    def __init__(self, store: KeyValueStore) -> None:
        """Initialize the transaction stack.

        Args:
            store: The store that rollbacks are applied to.
        """
        self._store = store
        self._transactions: list[Transaction] = []

        # Statistics
        self._begun_total = 0
        self._committed_total = 0
        self._rolled_back_total = 0
        self._commands_undone_total = 0

    @property
    def depth(self) -> int:
        return len(self._transactions)

    @property
    def in_transaction(self) -> bool:
        return bool(self._transactions)

    def begin(self) -> None:
        self._transactions.append(Transaction())
        self._begun_total += 1

    def add_command(self, cmd: MutatingCommand) -> None:
        # No open block: the command applies but cannot be rolled back
        if not self._transactions:
            return
        self._transactions[-1].add_command(cmd)

    def rollback(self) -> int:
        if not self._transactions:
            raise NoTransactionError()

        txn = self._transactions.pop()
        undone = txn.rollback(self._store)

        self._rolled_back_total += 1
        self._commands_undone_total += undone
        return undone

    def commit(self) -> None:
        if not self._transactions:
            raise NoTransactionError()

        self._transactions.clear()
        self._committed_total += 1

    def get_stats(self) -> TransactionStats:
        return TransactionStats(
            depth=len(self._transactions),
            begun_total=self._begun_total,
            committed_total=self._committed_total,
            rolled_back_total=self._rolled_back_total,
            commands_undone_total=self._commands_undone_total,
        )
