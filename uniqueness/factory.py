"""Generator factory wrapping an operation in a retry-until-unique loop."""

import functools
from collections.abc import Callable, Iterable
from typing import TypeVar

from .budget import DEFAULT_MAX_RETRIES, DEFAULT_MAX_TIME, Budget
from .normalize import Stringifier, resolve_stringifier, stringify
from .stores import MemoryStore, Store

T = TypeVar("T")
F = TypeVar("F", bound=Callable)


def unique_factory(
    fn: Callable[..., T],
    *,
    store: Store | set | None = None,
    max_retries: int = DEFAULT_MAX_RETRIES,
    max_time: float = DEFAULT_MAX_TIME,
    exclude: Iterable[object] = (),
    stringifier: Stringifier | None = stringify,
) -> Callable[..., T]:
    """Create a function returning only values not produced before.

    Args:
        fn: Operation producing candidate values
        store: Tracking store (defaults to a new, private MemoryStore)
        max_retries: Maximum attempts per call
        max_time: Maximum milliseconds per call
        exclude: Values that must never be returned
        stringifier: Normalizer applied before comparing and storing
            values; None compares raw values by equality

    Returns:
        A function taking the same arguments as ``fn``

    Raises:
        TypeError, ValueError: If a budget or the stringifier is invalid

    The returned function raises RetryBudgetExceeded or
    TimeBudgetExceeded when no unique value is found in time.

    Example:
        roll = unique_factory(lambda: random.randint(1, 6))
        first, second = roll(), roll()  # never equal
    """
    if not callable(fn):
        raise TypeError(f"fn must be callable, got {type(fn).__name__}")

    budget = Budget(max_retries=max_retries, max_time=max_time)
    normalize = resolve_stringifier(stringifier)

    # Explicit empty stores are kept, only None selects a private one
    _store = MemoryStore() if store is None else store

    # Normalized once, with the same normalizer as the store
    excluded = tuple(normalize(value) for value in exclude)

    @functools.wraps(fn)
    def wrapper(*args: object, **kwargs: object) -> T:
        attempts = budget.start()

        while True:
            attempts.check(len(_store))

            result = fn(*args, **kwargs)
            attempts.record()

            candidate = normalize(result)

            try:
                seen = candidate in _store
            except TypeError as e:
                raise TypeError(
                    f"Can't track {candidate!r} in the store: {e}. "
                    "Values compared with stringifier=None must be hashable, "
                    "pass a stringifier such as stringify instead"
                ) from e

            if seen or candidate in excluded:
                continue

            _store.add(candidate)
            return result

    wrapper.store = _store  # type: ignore[attr-defined]
    return wrapper


def unique_values(
    store: Store | set | None = None,
    max_retries: int = DEFAULT_MAX_RETRIES,
    max_time: float = DEFAULT_MAX_TIME,
    exclude: Iterable[object] = (),
    stringifier: Stringifier | None = stringify,
) -> Callable[[F], F]:
    """Decorator form of unique_factory.

    Example:
        @unique_values(max_retries=10)
        def pick_color():
            return random.choice(["red", "green", "blue"])
    """

    def decorator(func: F) -> F:
        return unique_factory(  # type: ignore[return-value]
            func,
            store=store,
            max_retries=max_retries,
            max_time=max_time,
            exclude=exclude,
            stringifier=stringifier,
        )

    return decorator
