"""Unit tests for InMemoryKeyValueStore."""

from __future__ import annotations

import pytest

from memkv.adapters.outbound import InMemoryKeyValueStore
from memkv.domain.value_objects import PreImage


@pytest.mark.unit
class TestInMemoryKeyValueStore:
    """Tests for the dict-backed store."""

    def test_get_missing_key(self, store: InMemoryKeyValueStore) -> None:
        """Absent keys read as None."""
        assert store.get("a") is None

    def test_set_new_key_reports_absent(self, store: InMemoryKeyValueStore) -> None:
        """Setting a new key reports that it did not exist."""
        before = store.set("a", "10")

        assert before == PreImage.absent()
        assert store.get("a") == "10"

    def test_set_existing_key_reports_previous_value(
        self, store: InMemoryKeyValueStore
    ) -> None:
        """Overwriting a key reports its previous value."""
        store.set("a", "10")
        before = store.set("a", "20")

        assert before == PreImage.of("10")
        assert store.get("a") == "20"

    def test_empty_string_is_a_value(self, store: InMemoryKeyValueStore) -> None:
        """The empty string is stored, not treated as absence."""
        store.set("a", "")

        assert "a" in store
        assert store.get("a") == ""
        assert store.set("a", "x") == PreImage.of("")

    def test_unset_existing_key(self, store: InMemoryKeyValueStore) -> None:
        """Unsetting removes the key and reports the old value."""
        store.set("a", "10")
        before = store.unset("a")

        assert before == PreImage.of("10")
        assert store.get("a") is None
        assert "a" not in store

    def test_unset_missing_key_is_noop(self, store: InMemoryKeyValueStore) -> None:
        """Unsetting an absent key changes nothing."""
        store.set("b", "1")
        before = store.unset("a")

        assert before == PreImage.absent()
        assert len(store) == 1

    def test_count_equal(self, store: InMemoryKeyValueStore) -> None:
        """count_equal counts every key holding the value."""
        store.set("a", "10")
        store.set("b", "10")
        store.set("c", "20")

        assert store.count_equal("10") == 2
        assert store.count_equal("20") == 1
        assert store.count_equal("30") == 0

    def test_seeded_store_is_copied(self) -> None:
        """The initial mapping is copied, not shared."""
        seed = {"a": "1"}
        store = InMemoryKeyValueStore(seed)
        store.set("b", "2")

        assert seed == {"a": "1"}
        assert sorted(store.items()) == [("a", "1"), ("b", "2")]
