"""
Explicit request deadline for long-running enumeration.

The deadline is passed into the search loop rather than read from
ambient state, so every call site decides its own time budget.
"""

import threading
import time
from typing import Callable, Optional

from .exceptions import SearchTimeoutError


class Deadline:
    """
    Time budget plus cooperative cancellation flag.

    Attributes:
        budget: Seconds allowed from construction, or None for no limit.
    """

    def __init__(
        self,
        budget: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if budget is not None and budget < 0:
            raise ValueError(f"budget must be >= 0, got {budget}")
        self.budget = budget
        self._clock = clock
        self._started = clock()
        self._cancelled = threading.Event()

    @classmethod
    def after(cls, seconds: float) -> "Deadline":
        """Deadline expiring `seconds` from now."""
        return cls(budget=seconds)

    @classmethod
    def never(cls) -> "Deadline":
        """Deadline that only expires when cancelled."""
        return cls(budget=None)

    def cancel(self) -> None:
        """Request cancellation; the next check() raises."""
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def elapsed(self) -> float:
        return self._clock() - self._started

    @property
    def remaining(self) -> Optional[float]:
        if self.budget is None:
            return None
        return max(0.0, self.budget - self.elapsed)

    @property
    def expired(self) -> bool:
        if self.cancelled:
            return True
        return self.budget is not None and self.elapsed > self.budget

    def check(self) -> None:
        """
        Raise if the deadline has passed or cancellation was requested.

        Raises:
            SearchTimeoutError: With elapsed time and the configured budget.
        """
        if self.expired:
            raise SearchTimeoutError(
                elapsed=self.elapsed,
                budget=None if self.cancelled else self.budget,
            )
