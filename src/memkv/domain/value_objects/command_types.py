"""Command-related enumerations.

These types tag the closed set of store commands and tell the caller
what to do after a line has been handled.
"""

from __future__ import annotations

from enum import Enum


NULL_RESULT = "NULL"
"""Printed by GET when the key is absent."""


class CommandKind(Enum):
    """Tag for the command variants that run against the store."""

    SET = "SET"
    UNSET = "UNSET"
    GET = "GET"
    COUNT_EQUAL = "NUMEQUALTO"

    @property
    def is_mutating(self) -> bool:
        """Check if commands of this kind change the store."""
        return self in (CommandKind.SET, CommandKind.UNSET)


class Outcome(Enum):
    """What the caller should do after a command has been handled.

    END does not stop anything inside the engine; it is reported as
    TERMINATE so the host (REPL, test, service handler) decides how
    to close the session.
    """

    CONTINUE = "continue"
    """Keep accepting commands."""

    TERMINATE = "terminate"
    """The session asked to end."""
