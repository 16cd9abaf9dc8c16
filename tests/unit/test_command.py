"""Unit tests for store commands and pre-images."""

from __future__ import annotations

import pytest

from memkv.adapters.outbound import InMemoryKeyValueStore
from memkv.domain.entities import (
    CountEqualCommand,
    GetCommand,
    SetCommand,
    UnsetCommand,
    execute_command,
    is_mutating,
    undo_command,
)
from memkv.domain.value_objects import NULL_RESULT, CommandKind, PreImage


@pytest.mark.unit
class TestPreImage:
    """Tests for the PreImage value object."""

    def test_absent(self) -> None:
        """absent() carries no value."""
        pre = PreImage.absent()
        assert not pre.existed
        assert pre.value is None

    def test_of_value(self) -> None:
        """of() carries the previous value."""
        pre = PreImage.of("")
        assert pre.existed
        assert pre.value == ""

    def test_existing_without_value_rejected(self) -> None:
        """An existing key must carry a value."""
        with pytest.raises(ValueError):
            PreImage(existed=True)

    def test_absent_with_value_rejected(self) -> None:
        """An absent key cannot carry a value."""
        with pytest.raises(ValueError):
            PreImage(existed=False, value="x")

    def test_immutable(self) -> None:
        """Pre-images are frozen."""
        pre = PreImage.of("1")
        with pytest.raises(AttributeError):
            pre.value = "2"  # type: ignore[misc]


@pytest.mark.unit
class TestCommandKinds:
    """Tests for command tagging."""

    def test_mutating_kinds(self) -> None:
        """Only SET and UNSET mutate."""
        assert is_mutating(SetCommand("a", "1"))
        assert is_mutating(UnsetCommand("a"))
        assert not is_mutating(GetCommand("a"))
        assert not is_mutating(CountEqualCommand("1"))

    def test_kind_tags(self) -> None:
        """Each variant carries its kind."""
        assert SetCommand("a", "1").kind == CommandKind.SET
        assert CountEqualCommand("1").kind == CommandKind.COUNT_EQUAL
        assert CommandKind.COUNT_EQUAL.value == "NUMEQUALTO"


@pytest.mark.unit
class TestSetCommand:
    """Tests for SET execute/undo."""

    def test_execute_sets_value(self, store: InMemoryKeyValueStore) -> None:
        """SET writes the value and prints nothing."""
        cmd = SetCommand("a", "10")

        assert execute_command(cmd, store) == ""
        assert store.get("a") == "10"
        assert cmd.pre_image == PreImage.absent()

    def test_undo_new_key_removes_it(self, store: InMemoryKeyValueStore) -> None:
        """Undoing SET of a new key removes the key."""
        cmd = SetCommand("a", "10")
        execute_command(cmd, store)
        undo_command(cmd, store)

        assert "a" not in store

    def test_undo_overwrite_restores_previous(self, store: InMemoryKeyValueStore) -> None:
        """Undoing an overwrite restores the previous value."""
        store.set("a", "10")
        cmd = SetCommand("a", "20")
        execute_command(cmd, store)
        undo_command(cmd, store)

        assert store.get("a") == "10"

    def test_interleaved_overwrites_undo_in_reverse(
        self, store: InMemoryKeyValueStore
    ) -> None:
        """Reverse-order undo restores the original value."""
        cmds = [SetCommand("a", "1"), SetCommand("a", "2"), SetCommand("a", "3")]
        for cmd in cmds:
            execute_command(cmd, store)

        for cmd in reversed(cmds):
            undo_command(cmd, store)

        assert "a" not in store

    def test_undo_before_execute_raises(self, store: InMemoryKeyValueStore) -> None:
        """A mutating command has nothing to undo before it runs."""
        with pytest.raises(RuntimeError, match="has not been executed"):
            undo_command(SetCommand("a", "1"), store)


@pytest.mark.unit
class TestUnsetCommand:
    """Tests for UNSET execute/undo."""

    def test_execute_removes_key(self, store: InMemoryKeyValueStore) -> None:
        """UNSET removes the key and prints nothing."""
        store.set("a", "10")
        cmd = UnsetCommand("a")

        assert execute_command(cmd, store) == ""
        assert "a" not in store
        assert cmd.pre_image == PreImage.of("10")

    def test_undo_restores_key(self, store: InMemoryKeyValueStore) -> None:
        """Undoing UNSET puts the value back."""
        store.set("a", "10")
        cmd = UnsetCommand("a")
        execute_command(cmd, store)
        undo_command(cmd, store)

        assert store.get("a") == "10"

    def test_undo_of_missing_key_does_nothing(self, store: InMemoryKeyValueStore) -> None:
        """Undoing UNSET of an absent key leaves the store alone."""
        cmd = UnsetCommand("a")
        execute_command(cmd, store)
        store.set("b", "1")
        undo_command(cmd, store)

        assert "a" not in store
        assert store.get("b") == "1"


@pytest.mark.unit
class TestReadCommands:
    """Tests for GET and NUMEQUALTO."""

    def test_get_existing(self, store: InMemoryKeyValueStore) -> None:
        """GET prints the value."""
        store.set("a", "10")
        assert execute_command(GetCommand("a"), store) == "10"

    def test_get_missing_prints_null(self, store: InMemoryKeyValueStore) -> None:
        """GET of an absent key prints NULL."""
        assert execute_command(GetCommand("a"), store) == NULL_RESULT

    def test_count_equal(self, store: InMemoryKeyValueStore) -> None:
        """NUMEQUALTO prints the decimal count."""
        for key in ("a", "b", "c"):
            store.set(key, "10")
        store.set("d", "20")

        assert execute_command(CountEqualCommand("10"), store) == "3"
        assert execute_command(CountEqualCommand("30"), store) == "0"

    def test_undo_is_noop(self, store: InMemoryKeyValueStore) -> None:
        """Undo of a read leaves the store untouched."""
        store.set("a", "10")
        undo_command(GetCommand("a"), store)
        undo_command(CountEqualCommand("10"), store)

        assert store.get("a") == "10"
