"""
Custom exceptions for the pathfinding module.

Provides a hierarchy of exceptions for clear error handling
and debugging of itinerary enumeration.
"""


class ItinerarySearchError(Exception):
    """Base exception for all itinerary search errors."""

    pass


class ValidationError(ItinerarySearchError):
    """Base exception for input validation errors."""

    pass


class InvalidCityError(ValidationError):
    """Raised when a city argument is missing or malformed."""

    def __init__(self, city: object, context: str = "city") -> None:
        self.city = city
        message = f"Invalid {context}: {city!r} (expected a non-empty string)"
        super().__init__(message)


class MissingDepartureError(ValidationError):
    """Raised when a segment without a departure instant reaches the index."""

    def __init__(self, segment_id: str) -> None:
        self.segment_id = segment_id
        message = f"Segment '{segment_id}' has no departure time and cannot be indexed"
        super().__init__(message)


class SearchTimeoutError(ItinerarySearchError):
    """Raised when enumeration runs past its deadline or is cancelled."""

    def __init__(self, elapsed: float, budget: float | None) -> None:
        self.elapsed = elapsed
        self.budget = budget
        if budget is None:
            message = f"Search cancelled after {elapsed:.3f}s"
        else:
            message = f"Search exceeded its {budget:.3f}s deadline (ran {elapsed:.3f}s)"
        super().__init__(message)
