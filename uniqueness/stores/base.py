"""Base store interface for tracking generated values."""

from abc import ABC, abstractmethod


class Store(ABC):
    """Abstract base class for tracking stores.

    Stores hold the normalized form of every value handed out so far.
    The generator only ever tests membership, adds and reads the size;
    clearing is for callers that want to start over.
    """

    @abstractmethod
    def __contains__(self, value: object) -> bool:
        """Check whether a normalized value was already accepted."""
        pass

    @abstractmethod
    def add(self, value: object) -> None:
        """Record a normalized value as accepted.

        Args:
            value: The normalized value
        """
        pass

    @abstractmethod
    def __len__(self) -> int:
        """Number of accepted values."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Forget every accepted value."""
        pass
