"""
Search criteria schema.

Defines the contract for search parameters passed to the search service.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from src.itinerary_search.exceptions import (
    InvalidCityError,
    InvalidSeatCountError,
    InvalidSortOrderError,
    InvalidTimeWindowError,
)
from src.itinerary_search.schemas.segment import SegmentFilter


class SortOrder(str, Enum):
    """Explicit ordering of a result bucket by total price."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: Union[str, "SortOrder", None]) -> Optional["SortOrder"]:
        """Accept 'asc'/'desc' (any case), a SortOrder, or None."""
        if value is None or isinstance(value, SortOrder):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidSortOrderError(value)


@dataclass(frozen=True)
class SearchCriteria:
    """
    Immutable itinerary search parameters.

    Attributes:
        origin: City the journey starts from.
        destination: City the journey ends in.
        transit: City the journey must pass through (None = direct search).
        sort_order: Explicit price ordering applied after classification.
        min_seats: Only segments with at least this many seats are searched.
        departure_from: Earliest segment departure (epoch seconds).
        departure_until: Latest segment departure (epoch seconds).
    """

    origin: str
    destination: str
    transit: Optional[str] = None
    sort_order: Optional[SortOrder] = None
    min_seats: int = 1
    departure_from: Optional[int] = None
    departure_until: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate criteria after initialization."""
        for value, context in (
            (self.origin, "origin city"),
            (self.destination, "destination city"),
        ):
            if not isinstance(value, str) or not value.strip():
                raise InvalidCityError(value, context)
        if self.transit is not None and (
            not isinstance(self.transit, str) or not self.transit.strip()
        ):
            raise InvalidCityError(self.transit, "transit city")
        if (
            isinstance(self.min_seats, bool)
            or not isinstance(self.min_seats, int)
            or self.min_seats < 1
        ):
            raise InvalidSeatCountError(self.min_seats)
        if (
            self.departure_from is not None
            and self.departure_until is not None
            and self.departure_from > self.departure_until
        ):
            raise InvalidTimeWindowError(self.departure_from, self.departure_until)

    @classmethod
    def create(
        cls,
        origin: str,
        destination: str,
        transit: Optional[str] = None,
        sort_order: Union[str, SortOrder, None] = None,
        min_seats: int = 1,
        departure_from: Optional[int] = None,
        departure_until: Optional[int] = None,
    ) -> "SearchCriteria":
        """
        Factory method for creating SearchCriteria.

        Normalizes an empty transit string to None and parses the sort
        order from its string form.
        """
        if isinstance(transit, str) and transit == "":
            transit = None

        return cls(
            origin=origin,
            destination=destination,
            transit=transit,
            sort_order=SortOrder.parse(sort_order),
            min_seats=min_seats,
            departure_from=departure_from,
            departure_until=departure_until,
        )

    def to_segment_filter(self) -> SegmentFilter:
        """
        Inventory filter for the search snapshot.

        The city pair is deliberately left out so the index spans the
        whole reachable graph, not just direct city pairs.
        """
        return SegmentFilter(
            min_quantity=self.min_seats,
            departure_from=self.departure_from,
            departure_until=self.departure_until,
        )
