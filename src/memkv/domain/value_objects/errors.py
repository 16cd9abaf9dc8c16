"""User-visible command errors.

All of these are non-fatal: the engine reports them and keeps accepting
commands. None of them is raised after the store or the transaction
stack has been modified.
"""

from __future__ import annotations


class CommandError(Exception):
    """Base class for errors reported back to the command issuer."""


class NotEnoughArgumentsError(CommandError):
    """A command was given fewer arguments than it requires."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(
            f"ErrNotEnoughArguments ({command}): not enough arguments, please refer to help"
        )


class UnknownCommandError(CommandError):
    """The command keyword is not recognised."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(
            f"ErrUnknownCommand ({command}): unknown command, please refer to help"
        )


class NoTransactionError(CommandError):
    """ROLLBACK or COMMIT was issued with no open transaction."""

    def __init__(self) -> None:
        super().__init__("NO TRANSACTION")
