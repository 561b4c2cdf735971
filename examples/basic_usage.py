"""Basic usage examples for uniqueness."""

import random

from uniqueness import (
    GLOBAL_STORE,
    BudgetExceededError,
    MemoryStore,
    clear_global_store,
    unique,
    unique_factory,
    unique_value,
    unique_values,
)


# Example 1: Generator with its own store
roll_die = unique_factory(lambda: random.randint(1, 6))


# Example 2: Decorator with exclusions
@unique_values(exclude=["admin", "root"], max_retries=100)
def pick_username():
    """Pick a username that's never been handed out."""
    return random.choice(["admin", "root", "alice", "bob", "carol"])


if __name__ == "__main__":
    print("=" * 60)
    print("Example 1: Unique die rolls")
    print("=" * 60)

    rolls = [roll_die() for _ in range(6)]
    print(f"Six rolls, no repeats: {rolls}")

    try:
        roll_die()
    except BudgetExceededError as e:
        print(f"Seventh roll failed after {e.attempts} attempts ({e.limit})\n")

    print("=" * 60)
    print("Example 2: Decorator with exclusions")
    print("=" * 60)

    for _ in range(3):
        print(f"Username: {pick_username()}")
    print("Notice: admin and root never appear!\n")

    print("=" * 60)
    print("Example 3: One-shot calls and the global store")
    print("=" * 60)

    token = unique(random.getrandbits, [16])
    print(f"Token: {token}")
    print(f"Global store now holds {len(GLOBAL_STORE)} value(s)")

    order_id = unique_value("order-1")
    print(f"Claimed: {order_id}")
    try:
        unique_value("order-1", max_retries=1)
    except BudgetExceededError:
        print("order-1 was already claimed")

    clear_global_store()
    print(f"After clearing: {len(GLOBAL_STORE)} value(s)\n")

    print("=" * 60)
    print("Example 4: Isolated store for one call site")
    print("=" * 60)

    store = MemoryStore()
    colors = [unique(random.choice, [["red", "green", "blue"]], store=store) for _ in range(3)]
    print(f"Colors: {colors}")
    print(f"Store: {store}")
