"""Command dispatcher.

Routes a parsed command plan to the domain:

    SET / UNSET          build command → register with innermost
                         transaction → execute
    GET / NUMEQUALTO     build command → execute (never registered)
    BEGIN / ROLLBACK /
    COMMIT               delegate to the transaction stack
    END                  report TERMINATE to the caller
    HELP                 return the command reference

Registration happens before execution so the undo log holds commands in
exactly the order they were applied.
"""

from __future__ import annotations

from dataclasses import dataclass

from memkv.adapters.inbound.command_parser import CommandPlan, Keyword
from memkv.domain.entities.command import (
    Command,
    CountEqualCommand,
    GetCommand,
    SetCommand,
    UnsetCommand,
    execute_command,
    is_mutating,
)
from memkv.domain.value_objects import (
    CommandError,
    NotEnoughArgumentsError,
    Outcome,
)
from memkv.ports.inbound.transaction_stack import TransactionStack
from memkv.ports.outbound.key_value_store import KeyValueStore


HELP_TEXT = """Supported commands:
SET <name> <value> - Set the variable name to the value <value>. Neither variable names nor values contain spaces.
GET <name> - Print out the value of the variable name, or NULL if that variable is not set.
UNSET <name> - Unset the variable name, making it just like that variable was never set.
NUMEQUALTO <value> - Print out the number of variables that are currently set to value. If no variables equal that value, print 0.
END - Exit the program.

Supported transactions:
BEGIN - Open a new transaction block. Transaction blocks can be nested; a BEGIN can be issued inside of an existing block.
ROLLBACK - Undo all of the commands issued in the most recent transaction block, and close the block. Print nothing if successful, or print NO TRANSACTION if no transaction is in progress.
COMMIT - Close all open transaction blocks, permanently applying the changes made in them. Print nothing if successful, or print NO TRANSACTION if no transaction is in progress."""


@dataclass
class ExecutionResult:
    """Result of handling one command line."""

    output: str = ""
    error: CommandError | None = None
    outcome: Outcome = Outcome.CONTINUE

    @property
    def success(self) -> bool:
        """Return True if the command completed without an error."""
        return self.error is None

    @property
    def message(self) -> str:
        """Return the error message, or an empty string on success."""
        return "" if self.error is None else str(self.error)

    @property
    def terminate(self) -> bool:
        """Return True if the caller should end the session."""
        return self.outcome == Outcome.TERMINATE


class CommandDispatcher:
    """Executes command plans against a store and transaction stack.

    Errors are raised, not returned; the engine turns them into results.
    """

    def __init__(self, store: KeyValueStore, transactions: TransactionStack) -> None:
        """Initialize the dispatcher.

        Args:
            store: The store commands run against.
            transactions: The stack that records undo logs.
        """
        self._store = store
        self._transactions = transactions

    def dispatch(self, plan: CommandPlan) -> ExecutionResult:
        """Handle a parsed command.

        Args:
            plan: The parsed command line.

        Returns:
            The command's result.

        Raises:
            NotEnoughArgumentsError: If the plan has too few arguments.
            NoTransactionError: On ROLLBACK or COMMIT with no open block.
        """
        keyword = plan.keyword

        if keyword == Keyword.NOOP:
            return ExecutionResult()
        elif keyword == Keyword.END:
            return ExecutionResult(outcome=Outcome.TERMINATE)
        elif keyword == Keyword.HELP:
            return ExecutionResult(output=HELP_TEXT)
        elif keyword == Keyword.BEGIN:
            self._transactions.begin()
            return ExecutionResult()
        elif keyword == Keyword.ROLLBACK:
            self._transactions.rollback()
            return ExecutionResult()
        elif keyword == Keyword.COMMIT:
            self._transactions.commit()
            return ExecutionResult()

        cmd = self.build_command(plan)
        if is_mutating(cmd):
            self._transactions.add_command(cmd)
        return ExecutionResult(output=execute_command(cmd, self._store))

    def build_command(self, plan: CommandPlan) -> Command:
        """Build the store command for a plan.

        Raises:
            NotEnoughArgumentsError: If the plan has too few arguments.
            ValueError: If the keyword does not map to a store command.
        """
        keyword = plan.keyword
        args = plan.args

        if len(args) < keyword.min_args:
            raise NotEnoughArgumentsError(keyword.value)

        if keyword == Keyword.SET:
            return SetCommand(key=args[0], value=args[1])
        elif keyword == Keyword.UNSET:
            return UnsetCommand(key=args[0])
        elif keyword == Keyword.GET:
            return GetCommand(key=args[0])
        elif keyword == Keyword.NUMEQUALTO:
            return CountEqualCommand(value=args[0])
        else:
            raise ValueError(f"{keyword.value} is not a store command")
