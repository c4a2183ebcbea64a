"""
Input validation for the pathfinding module.

Provides validation functions that check inputs before the search runs,
ensuring fail-fast behavior with clear error messages.
"""

from typing import Mapping, Optional, Sequence

from .candidates import Leg
from .exceptions import InvalidCityError, MissingDepartureError


def validate_city(city: object, context: str = "city") -> None:
    """
    Validate that a city argument is a non-empty string.

    Args:
        city: Value to validate.
        context: Description for error message.

    Raises:
        InvalidCityError: If city is not a non-empty string.
    """
    if not isinstance(city, str) or not city.strip():
        raise InvalidCityError(city, context)


def validate_departures(segments_by_city: Mapping[str, Sequence[Leg]]) -> None:
    """
    Validate that every indexed segment has a departure time.

    Args:
        segments_by_city: Mapping of origin city to its outbound segments.

    Raises:
        MissingDepartureError: On the first segment lacking a departure.
    """
    for segments in segments_by_city.values():
        for segment in segments:
            if segment.departure is None:
                raise MissingDepartureError(segment.segment_id)


def validate_enumeration_inputs(
    segments_by_city: Mapping[str, Sequence[Leg]],
    origin: str,
    destination: str,
    transit: Optional[str] = None,
) -> None:
    """
    Validate all inputs for the path enumerator.

    Cheap argument checks run before the index scan.

    Raises:
        InvalidCityError: If origin, destination or transit is malformed.
        MissingDepartureError: If the index holds a segment with no departure.
    """
    validate_city(origin, "origin city")
    validate_city(destination, "destination city")
    if transit is not None:
        validate_city(transit, "transit city")

    validate_departures(segments_by_city)
