"""
Exception hierarchy for the itinerary search engine.

Extends the pathfinding errors with request validation and inventory
failures so callers can catch a single base class.
"""

from typing import Optional

from src.pathfinding.exceptions import (
    InvalidCityError,
    ItinerarySearchError,
    MissingDepartureError,
    SearchTimeoutError,
    ValidationError,
)

__all__ = [
    "ItinerarySearchError",
    "ValidationError",
    "InvalidCityError",
    "MissingDepartureError",
    "InvalidSeatCountError",
    "InvalidSegmentTimesError",
    "InvalidSortOrderError",
    "InvalidTimeWindowError",
    "InventoryError",
    "InsufficientInventoryError",
    "SegmentNotFoundError",
    "RepositoryError",
    "SearchTimeoutError",
]


class InvalidSeatCountError(ValidationError):
    """Raised when a seat count is negative, zero where forbidden, or not an int."""

    def __init__(self, count: object, minimum: int = 1) -> None:
        self.count = count
        self.minimum = minimum
        message = f"Invalid seat count {count!r}: must be an integer >= {minimum}"
        super().__init__(message)


class InvalidSegmentTimesError(ValidationError):
    """Raised when a segment departs at or after its arrival."""

    def __init__(self, segment_id: str, departure: int, arrival: int) -> None:
        self.segment_id = segment_id
        self.departure = departure
        self.arrival = arrival
        message = (
            f"Segment '{segment_id}': departure ({departure}) "
            f"must be < arrival ({arrival})"
        )
        super().__init__(message)


class InvalidSortOrderError(ValidationError):
    """Raised when a sort order is neither 'asc' nor 'desc'."""

    def __init__(self, value: object) -> None:
        self.value = value
        message = f"Invalid sort order {value!r}: must be 'asc' or 'desc'"
        super().__init__(message)


class InvalidTimeWindowError(ValidationError):
    """Raised when a departure window is inverted."""

    def __init__(self, start: int, end: int) -> None:
        self.start = start
        self.end = end
        message = f"Invalid departure window: start ({start}) must be <= end ({end})"
        super().__init__(message)


class InventoryError(ItinerarySearchError):
    """Base exception for inventory collaborator failures."""

    pass


class InsufficientInventoryError(InventoryError):
    """Raised when a purchase asks for more seats than remain."""

    def __init__(
        self,
        segment_id: str,
        requested: int,
        available: Optional[int] = None,
    ) -> None:
        self.segment_id = segment_id
        self.requested = requested
        self.available = available
        if available is None:
            message = (
                f"Could not reserve {requested} seat(s) on segment '{segment_id}': "
                "inventory changed concurrently"
            )
        else:
            message = (
                f"There are no empty seats on segment '{segment_id}': "
                f"requested {requested}, only {available} left"
            )
        super().__init__(message)


class SegmentNotFoundError(InventoryError):
    """Raised when a segment identity is unknown to the inventory."""

    def __init__(self, segment_id: str) -> None:
        self.segment_id = segment_id
        super().__init__(f"Segment '{segment_id}' not found")


class RepositoryError(InventoryError):
    """Opaque storage failure raised by an inventory adapter."""

    pass
