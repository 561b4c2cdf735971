"""Tests for store implementations."""

import pytest

from uniqueness.stores import GLOBAL_STORE, MemoryStore, Store, clear_global_store


def test_memory_store_add_contains():
    """Test basic add/contains operations."""
    store = MemoryStore()

    store.add('"a"')

    assert '"a"' in store
    assert '"b"' not in store
    assert len(store) == 1


def test_memory_store_add_is_idempotent():
    """Test that adding the same value twice keeps one entry."""
    store = MemoryStore()

    store.add("x")
    store.add("x")

    assert len(store) == 1


def test_memory_store_preseed():
    """Test seeding a store with existing values."""
    store = MemoryStore(["a", "b", "a"])

    assert len(store) == 2
    assert sorted(store) == ["a", "b"]


def test_memory_store_discard():
    """Test forgetting a single value."""
    store = MemoryStore(["a", "b"])

    store.discard("a")
    store.discard("missing")

    assert "a" not in store
    assert list(store) == ["b"]


def test_memory_store_clear():
    """Test clearing all values."""
    store = MemoryStore(["a", "b"])

    store.clear()

    assert len(store) == 0
    assert "a" not in store


def test_memory_store_repr():
    """Test that repr reports the size."""
    assert repr(MemoryStore(["a"])) == "MemoryStore(1 values)"


def test_store_is_abstract():
    """Test that the base class can't be used directly."""
    with pytest.raises(TypeError):
        Store()


def test_custom_store_subclass():
    """Test that a minimal subclass satisfies the interface."""

    class ListStore(Store):
        def __init__(self):
            self.values = []

        def __contains__(self, value):
            return value in self.values

        def add(self, value):
            self.values.append(value)

        def __len__(self):
            return len(self.values)

        def clear(self):
            self.values.clear()

    store = ListStore()
    store.add("a")

    assert "a" in store
    assert len(store) == 1


def test_global_store_clear():
    """Test clearing the global store."""
    GLOBAL_STORE.add("left over")

    clear_global_store()

    assert len(GLOBAL_STORE) == 0
