"""One-shot entry points defaulting to the process-wide store."""

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import TypeVar

from .budget import DEFAULT_MAX_RETRIES, DEFAULT_MAX_TIME
from .factory import unique_factory
from .normalize import Stringifier, stringify
from .stores import GLOBAL_STORE, Store

T = TypeVar("T")


def unique(
    fn: Callable[..., T],
    args: Sequence[object] = (),
    kwargs: Mapping[str, object] | None = None,
    *,
    store: Store | set | None = None,
    max_retries: int = DEFAULT_MAX_RETRIES,
    max_time: float = DEFAULT_MAX_TIME,
    exclude: Iterable[object] = (),
    stringifier: Stringifier | None = stringify,
) -> T:
    """Call ``fn`` until it returns a value not handed out before.

    Unlike unique_factory, a missing ``store`` means GLOBAL_STORE, so
    every call without one shares state with every other such call in
    the process. Pass your own store to keep call sites isolated.

    Args:
        fn: Operation producing candidate values
        args: Positional arguments for every call of ``fn``
        kwargs: Keyword arguments for every call of ``fn``

    Other keyword arguments are those of unique_factory.

    Example:
        token = unique(secrets.token_hex, [4])
    """
    generate = unique_factory(
        fn,
        store=GLOBAL_STORE if store is None else store,
        max_retries=max_retries,
        max_time=max_time,
        exclude=exclude,
        stringifier=stringifier,
    )
    return generate(*args, **(kwargs or {}))


def unique_value(
    value: T,
    *,
    store: Store | set | None = None,
    max_retries: int = DEFAULT_MAX_RETRIES,
    max_time: float = DEFAULT_MAX_TIME,
    exclude: Iterable[object] = (),
    stringifier: Stringifier | None = stringify,
) -> T:
    """Claim a plain value, failing if it was already handed out.

    The value is treated as an operation that always returns it, so a
    duplicate or excluded value exhausts the retry budget.
    """
    return unique(
        lambda: value,
        store=store,
        max_retries=max_retries,
        max_time=max_time,
        exclude=exclude,
        stringifier=stringifier,
    )
