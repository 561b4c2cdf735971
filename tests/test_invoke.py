"""Tests for the one-shot invoker and the global store."""

import random

import pytest

from uniqueness import (
    GLOBAL_STORE,
    MemoryStore,
    RetryBudgetExceeded,
    clear_global_store,
    stringify,
    unique,
    unique_factory,
    unique_value,
)


@pytest.fixture(autouse=True)
def clean_global_store():
    """Start and finish every test with an empty global store."""
    clear_global_store()
    yield
    clear_global_store()


def test_unique_uses_global_store():
    """Test that calls without a store accumulate in GLOBAL_STORE."""

    def pick():
        return random.choice(["a", "b", "c"])

    results = {unique(pick) for _ in range(3)}

    assert results == {"a", "b", "c"}
    assert stringify("a") in GLOBAL_STORE
    assert stringify("b") in GLOBAL_STORE
    assert stringify("c") in GLOBAL_STORE


def test_unique_with_arguments():
    """Test that args and kwargs are passed to the operation."""
    call_args = []

    def double(x, plus=0):
        call_args.append((x, plus))
        return x * 2 + plus

    assert unique(double, [5]) == 10
    assert unique(double, (5,), {"plus": 1}) == 11
    assert call_args == [(5, 0), (5, 1)]


def test_global_calls_see_each_other():
    """Test that two call sites share the global store."""
    assert unique(lambda: "shared") == "shared"

    with pytest.raises(RetryBudgetExceeded):
        unique(lambda: "shared", max_retries=5)


def test_distinct_stores_are_isolated():
    """Test that explicit stores keep call sites apart."""
    first_store = MemoryStore()
    second_store = set()

    assert unique(lambda: "same", store=first_store) == "same"
    assert unique(lambda: "same", store=second_store) == "same"
    assert len(GLOBAL_STORE) == 0


def test_explicit_empty_store_not_replaced():
    """Test that an empty store is used instead of the global one."""
    store = MemoryStore()

    unique(lambda: 1, store=store)

    assert len(store) == 1
    assert len(GLOBAL_STORE) == 0


def test_factory_does_not_touch_global_store():
    """Test that generators from the factory keep their own store."""
    generate = unique_factory(lambda: "private")

    generate()

    assert len(GLOBAL_STORE) == 0


def test_preseeded_global_store():
    """Test that seeding the global store affects later calls at once."""
    GLOBAL_STORE.add(stringify("taken"))
    values = iter(["taken", "free"])

    assert unique(lambda: next(values)) == "free"


def test_clearing_global_store_allows_repeats():
    """Test that clearing the global store forgets handed-out values."""
    assert unique(lambda: 7) == 7

    clear_global_store()

    assert unique(lambda: 7) == 7


def test_unique_value_claims_once():
    """Test that a plain value is accepted once and then rejected."""
    assert unique_value("order-1") == "order-1"

    with pytest.raises(RetryBudgetExceeded) as exc_info:
        unique_value("order-1", max_retries=2)

    assert exc_info.value.attempts == 2
    assert exc_info.value.store_size == 1


def test_unique_value_respects_exclude():
    """Test that an excluded plain value is refused."""
    with pytest.raises(RetryBudgetExceeded):
        unique_value("admin", exclude=["admin"], max_retries=1)

    assert len(GLOBAL_STORE) == 0


def test_unique_value_with_store():
    """Test that unique_value honours an explicit store."""
    store = set()

    assert unique_value({"id": 1}, store=store) == {"id": 1}
    assert store == {stringify({"id": 1})}
    assert len(GLOBAL_STORE) == 0
