"""Attempt budgets bounding the retry loop."""

import time
from dataclasses import dataclass, field

from .exceptions import RetryBudgetExceeded, TimeBudgetExceeded
from .utils import ensure_budget

DEFAULT_MAX_RETRIES = 50
DEFAULT_MAX_TIME = 50  # milliseconds


def now_ms() -> float:
    """Current monotonic time in milliseconds."""
    return time.monotonic() * 1000


@dataclass(frozen=True)
class Budget:
    """Ceilings shared by every call of one generator.

    Attributes:
        max_retries: Maximum number of attempts per call
        max_time: Maximum elapsed milliseconds per call
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    max_time: float = DEFAULT_MAX_TIME

    def __post_init__(self) -> None:
        ensure_budget(self.max_retries, "max_retries", integer=True)
        ensure_budget(self.max_time, "max_time")

    def start(self) -> "Attempts":
        """Begin tracking a single call against this budget."""
        return Attempts(budget=self, started_at=now_ms())


@dataclass
class Attempts:
    """Per-call attempt counter and start time."""

    budget: Budget
    started_at: float
    count: int = field(default=0)

    def elapsed(self) -> float:
        return now_ms() - self.started_at

    def check(self, store_size: int) -> None:
        """Raise if either ceiling has been reached.

        Time is checked before retries, so a call over both ceilings
        reports the time budget.

        Raises:
            TimeBudgetExceeded: If elapsed time reached max_time
            RetryBudgetExceeded: If the attempt count reached max_retries
        """
        elapsed = self.elapsed()

        if elapsed >= self.budget.max_time:
            raise TimeBudgetExceeded(
                self.budget.max_time, store_size, self.count, elapsed
            )

        if self.count >= self.budget.max_retries:
            raise RetryBudgetExceeded(
                self.budget.max_retries, store_size, self.count, elapsed
            )

    def record(self) -> None:
        self.count += 1
