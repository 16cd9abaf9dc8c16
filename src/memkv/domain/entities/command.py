"""Store commands and their execute/undo rules.

Commands are a closed set of variants. Each variant is a plain
dataclass tagged with a CommandKind; execution and undo are functions
that match over the variant instead of methods on a common base.

Mutating variants (SET, UNSET) capture the key's pre-image when they
execute. Undo restores that pre-image, which brings the key back to its
exact state before the command no matter how many times it was written
afterwards, provided later commands were undone first.

Non-mutating variants (GET, NUMEQUALTO) carry no undo state and are
never registered with a transaction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

from memkv.domain.value_objects import NULL_RESULT, CommandKind, PreImage
from memkv.ports.outbound.key_value_store import KeyValueStore


@dataclass
class SetCommand:
    """SET <key> <value> - insert or overwrite a key."""

    kind: ClassVar[CommandKind] = CommandKind.SET

    key: str
    value: str
    pre_image: PreImage | None = field(default=None, init=False)


@dataclass
class UnsetCommand:
    """UNSET <key> - remove a key."""

    kind: ClassVar[CommandKind] = CommandKind.UNSET

    key: str
    pre_image: PreImage | None = field(default=None, init=False)


@dataclass(frozen=True)
class GetCommand:
    """GET <key> - read a key."""

    kind: ClassVar[CommandKind] = CommandKind.GET

    key: str


@dataclass(frozen=True)
class CountEqualCommand:
    """NUMEQUALTO <value> - count keys holding a value."""

    kind: ClassVar[CommandKind] = CommandKind.COUNT_EQUAL

    value: str


MutatingCommand = Union[SetCommand, UnsetCommand]
Command = Union[SetCommand, UnsetCommand, GetCommand, CountEqualCommand]


def is_mutating(cmd: Command) -> bool:
    """Return True if the command changes the store."""
    return cmd.kind.is_mutating


def execute_command(cmd: Command, store: KeyValueStore) -> str:
    """Apply a command to the store.

    Args:
        cmd: The command to run.
        store: The store to run it against.

    Returns:
        The printable result. Empty for SET and UNSET, the value or
        ``NULL`` for GET, the decimal count for NUMEQUALTO.
    """
    if isinstance(cmd, SetCommand):
        cmd.pre_image = store.set(cmd.key, cmd.value)
        return ""
    elif isinstance(cmd, UnsetCommand):
        cmd.pre_image = store.unset(cmd.key)
        return ""
    elif isinstance(cmd, GetCommand):
        value = store.get(cmd.key)
        return NULL_RESULT if value is None else value
    elif isinstance(cmd, CountEqualCommand):
        return str(store.count_equal(cmd.value))
    else:
        raise TypeError(f"Unsupported command: {type(cmd).__name__}")


def undo_command(cmd: Command, store: KeyValueStore) -> None:
    """Revert a previously executed command.

    Undo of GET and NUMEQUALTO does nothing.

    Args:
        cmd: The command to revert.
        store: The store it was executed against.

    Raises:
        RuntimeError: If a mutating command is undone before it executed.
    """
    if isinstance(cmd, (GetCommand, CountEqualCommand)):
        return

    if not isinstance(cmd, (SetCommand, UnsetCommand)):
        raise TypeError(f"Unsupported command: {type(cmd).__name__}")

    if cmd.pre_image is None:
        raise RuntimeError(f"{cmd.kind.value} {cmd.key} has not been executed")

    if cmd.pre_image.existed:
        store.set(cmd.key, cmd.pre_image.value)
    elif isinstance(cmd, SetCommand):
        store.unset(cmd.key)
    # UNSET of an absent key changed nothing
