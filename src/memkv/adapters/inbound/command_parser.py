"""Line parser for the text command protocol.

One command per line: a case-insensitive keyword followed by
whitespace-separated arguments. There is no quoting or escaping, so
neither keys nor values can contain spaces.

Supported keywords:
    - GET, SET, UNSET, NUMEQUALTO (store commands)
    - BEGIN, ROLLBACK, COMMIT (transaction control)
    - END (terminate the session)
    - HELP, ? (print the command reference)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from memkv.domain.value_objects import UnknownCommandError


class Keyword(Enum):
    """Command keywords accepted on a line."""

    GET = "GET"
    SET = "SET"
    UNSET = "UNSET"
    NUMEQUALTO = "NUMEQUALTO"
    BEGIN = "BEGIN"
    ROLLBACK = "ROLLBACK"
    COMMIT = "COMMIT"
    END = "END"
    HELP = "HELP"
    NOOP = ""

    @property
    def min_args(self) -> int:
        """Minimum number of arguments the keyword requires."""
        return _MIN_ARGS.get(self, 0)


_MIN_ARGS = {
    Keyword.GET: 1,
    Keyword.SET: 2,
    Keyword.UNSET: 1,
    Keyword.NUMEQUALTO: 1,
}

_ALIASES = {
    "?": Keyword.HELP,
}


@dataclass
class CommandPlan:
    """A parsed command line."""

    keyword: Keyword
    args: list[str] = field(default_factory=list)
    token: str = ""

    def __str__(self) -> str:
        return " ".join([self.keyword.value, *self.args]).strip()


class CommandParser:
    """Parser that turns raw lines into command plans.

    Usage:
        parser = CommandParser()
        plan = parser.parse("set a 10")
        plan.keyword        # Keyword.SET
        plan.args           # ["a", "10"]

    Arity is not checked here; the dispatcher rejects short argument
    lists when it builds the command.
    """

    def parse(self, line: str) -> CommandPlan:
        """Parse one line of input.

        Args:
            line: The raw line, with or without a trailing newline.

        Returns:
            The parsed plan. A blank line yields a NOOP plan.

        Raises:
            UnknownCommandError: If the keyword is not recognised.
        """
        parts = line.split()
        if not parts:
            return CommandPlan(Keyword.NOOP)

        token = parts[0].upper()
        args = parts[1:]

        if token in _ALIASES:
            return CommandPlan(_ALIASES[token], args, token)

        try:
            keyword = Keyword(token)
        except ValueError:
            raise UnknownCommandError(token) from None

        return CommandPlan(keyword, args, token)
