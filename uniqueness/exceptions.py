"""Exceptions for unique value generation."""


class UniquenessError(Exception):
    """Base exception for uniqueness-related errors."""


class BudgetExceededError(UniquenessError):
    """Raise when a unique value could not be produced within a budget.

    Attributes:
        limit: Name of the ceiling that was hit ("max_retries" or "max_time")
        max_value: Configured value of that ceiling
        store_size: Number of values in the store when giving up
        attempts: Number of times the operation was invoked
        elapsed: Milliseconds spent before giving up
    """

    limit = ""

    def __init__(
        self,
        max_value: float,
        store_size: int,
        attempts: int,
        elapsed: float,
    ) -> None:
        self.max_value = max_value
        self.store_size = store_size
        self.attempts = attempts
        self.elapsed = elapsed
        super().__init__(_format_message(self.limit, max_value, store_size, attempts, elapsed))


class RetryBudgetExceeded(BudgetExceededError):
    """Raise when max_retries attempts produced no unique value."""

    limit = "max_retries"


class TimeBudgetExceeded(BudgetExceededError):
    """Raise when max_time milliseconds elapsed without a unique value."""

    limit = "max_time"


def _format_message(
    limit: str, max_value: float, store_size: int, attempts: int, elapsed: float
) -> str:
    return (
        f"Exceeded {limit}: {max_value} for uniqueness check.\n\n"
        f"Found {store_size} unique entries before throwing error.\n"
        f"retried: {attempts}\n"
        f"total time: {elapsed:.0f}ms\n\n"
        "May not be able to generate any more unique values with current settings.\n"
        "Try adjusting max_time or max_retries parameters."
    )
