"""Domain entities for the key/value store.

Exports:
    Commands:
        - SetCommand, UnsetCommand: Mutating commands with a pre-image
        - GetCommand, CountEqualCommand: Read-only commands
        - Command, MutatingCommand: Variant unions
        - execute_command, undo_command, is_mutating: Variant dispatch

    Transactions:
        - Transaction: Ordered undo log for one nesting level
"""

from memkv.domain.entities.command import (
    Command,
    CountEqualCommand,
    GetCommand,
    MutatingCommand,
    SetCommand,
    UnsetCommand,
    execute_command,
    is_mutating,
    undo_command,
)
from memkv.domain.entities.transaction import Transaction

__all__ = [
    # Commands
    "Command",
    "MutatingCommand",
    "SetCommand",
    "UnsetCommand",
    "GetCommand",
    "CountEqualCommand",
    "execute_command",
    "undo_command",
    "is_mutating",
    # Transactions
    "Transaction",
]
