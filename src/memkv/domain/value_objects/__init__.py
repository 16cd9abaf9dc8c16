"""Value objects for the key/value store domain.

Value objects are immutable types that represent domain concepts.
They have no identity - two value objects with the same attributes are equal.

Exports:
    Pre-images:
        - PreImage: State of a key before a mutation

    Command Types:
        - CommandKind: Tag for the store command variants
        - Outcome: Continue or terminate after a command
        - NULL_RESULT: Sentinel printed for absent keys

    Errors:
        - CommandError: Base class for user-visible errors
        - NotEnoughArgumentsError, UnknownCommandError, NoTransactionError
"""

from memkv.domain.value_objects.command_types import NULL_RESULT, CommandKind, Outcome
from memkv.domain.value_objects.errors import (
    CommandError,
    NotEnoughArgumentsError,
    NoTransactionError,
    UnknownCommandError,
)
from memkv.domain.value_objects.pre_image import PreImage

__all__ = [
    # Pre-images
    "PreImage",
    # Command types
    "CommandKind",
    "Outcome",
    "NULL_RESULT",
    # Errors
    "CommandError",
    "NotEnoughArgumentsError",
    "NoTransactionError",
    "UnknownCommandError",
]
