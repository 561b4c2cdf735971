"""Uniqueness - Retry-until-unique value generation for Python.

Wraps a value-producing function so that it never returns the same
value twice, retrying until a new value appears or a budget runs out.

Example:
    roll = unique_factory(lambda: random.randint(1, 6))
    roll(), roll(), roll()  # three different faces
"""

from .budget import DEFAULT_MAX_RETRIES, DEFAULT_MAX_TIME
from .exceptions import (
    BudgetExceededError,
    RetryBudgetExceeded,
    TimeBudgetExceeded,
    UniquenessError,
)
from .factory import unique_factory, unique_values
from .invoke import unique, unique_value
from .normalize import digest, identity, stringify
from .stores import GLOBAL_STORE, MemoryStore, Store, clear_global_store

__version__ = "0.1.0"

__all__ = [
    "unique_factory",
    "unique_values",
    "unique",
    "unique_value",
    "UniquenessError",
    "BudgetExceededError",
    "RetryBudgetExceeded",
    "TimeBudgetExceeded",
    "Store",
    "MemoryStore",
    "GLOBAL_STORE",
    "clear_global_store",
    "stringify",
    "identity",
    "digest",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_MAX_TIME",
]
