"""In-memory store implementation."""

from collections.abc import Iterable, Iterator

from .base import Store


class MemoryStore(Store):
    """In-memory store backed by a set.

    Note: This store is NOT thread-safe and does not persist across
    processes or restarts. Callers sharing one store between threads
    must serialize access themselves.

    Args:
        values: Already-normalized values to pre-seed the store with
    """

    def __init__(self, values: Iterable[object] = ()) -> None:
        self._values: set[object] = set(values)

    def __contains__(self, value: object) -> bool:
        return value in self._values

    def add(self, value: object) -> None:
        self._values.add(value)

    def discard(self, value: object) -> None:
        """Forget a single value, if present."""
        self._values.discard(value)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[object]:
        return iter(self._values)

    def clear(self) -> None:
        """Forget every accepted value, so any of them may be handed out again."""
        self._values.clear()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._values)} values)"
