"""
Itinerary result schemas.

Defines the output contract of a search: itineraries grouped into direct
and connecting buckets, and the receipt returned by a purchase.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from src.itinerary_search.schemas.segment import Segment


class ItineraryCategory(str, Enum):
    """Presentation tag attached by the result classifier."""

    NONE = "none"
    FASTEST = "fastest"
    CHEAPEST = "cheapest"
    CHEAPEST_FASTEST = "cheapest_fastest"


@dataclass(frozen=True)
class Itinerary:
    """
    Immutable representation of a complete journey.

    Aggregates connected Segments into one result. Every leg lands where
    the next one departs and no segment identity appears twice.
    """

    legs: Tuple[Segment, ...]
    category: ItineraryCategory = ItineraryCategory.NONE

    @property
    def total_price(self) -> float:
        """Sum of leg prices; unset prices count as zero."""
        return sum(leg.price or 0.0 for leg in self.legs)

    @property
    def duration(self) -> int:
        """Elapsed seconds from first departure to last arrival."""
        return self.arrival - self.departure

    @property
    def departure(self) -> int:
        return self.legs[0].departure

    @property
    def arrival(self) -> int:
        return self.legs[-1].arrival

    @property
    def origin(self) -> str:
        return self.legs[0].origin

    @property
    def destination(self) -> str:
        return self.legs[-1].destination

    @property
    def num_legs(self) -> int:
        return len(self.legs)

    @property
    def is_direct(self) -> bool:
        return len(self.legs) == 1

    @property
    def cities(self) -> List[str]:
        """Ordered list of all cities on the journey."""
        return [self.legs[0].origin] + [leg.destination for leg in self.legs]

    @property
    def segment_ids(self) -> Tuple[str, ...]:
        return tuple(leg.segment_id for leg in self.legs)

    @property
    def layovers(self) -> List[int]:
        """Connection waits in seconds, one per consecutive leg pair."""
        return [
            nxt.departure - cur.arrival for cur, nxt in zip(self.legs, self.legs[1:])
        ]

    def with_category(self, category: ItineraryCategory) -> "Itinerary":
        return replace(self, category=category)

    @classmethod
    def from_legs(cls, legs: Sequence[Segment]) -> "Itinerary":
        """
        Factory method to create an Itinerary from ordered legs.

        Raises:
            ValueError: If legs are empty, disconnected, repeat a segment,
                or lack a departure time.
        """
        if not legs:
            raise ValueError("Itinerary must have at least one leg")

        for leg in legs:
            if leg.departure is None:
                raise ValueError(f"Leg '{leg.segment_id}' has no departure time")

        for cur, nxt in zip(legs, legs[1:]):
            if cur.destination != nxt.origin:
                raise ValueError(
                    f"Leg '{cur.segment_id}' lands in {cur.destination} "
                    f"but '{nxt.segment_id}' departs from {nxt.origin}"
                )

        ids = [leg.segment_id for leg in legs]
        if len(set(ids)) != len(ids):
            raise ValueError("Itinerary repeats a segment")

        return cls(legs=tuple(legs))


@dataclass(frozen=True)
class SearchResult:
    """
    Classified search output.

    Attributes:
        direct: One-leg itineraries (no transit city requested).
        connecting: Two-leg itineraries through the transit city, or the
            single best-effort fallback entry.
        is_fallback: True when `connecting` holds a fallback entry that did
            not satisfy the requested constraints.
    """

    direct: Tuple[Itinerary, ...] = ()
    connecting: Tuple[Itinerary, ...] = ()
    is_fallback: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.direct and not self.connecting

    @property
    def itineraries(self) -> Tuple[Itinerary, ...]:
        return self.direct + self.connecting


@dataclass(frozen=True)
class PurchaseReceipt:
    """
    The purchased slice of a segment.

    Carries the segment's identity and timing, but `quantity` is the number
    of seats bought and `price` the amount charged for them. This is not
    the remaining inventory state.
    """

    segment_id: str
    origin: str
    destination: str
    quantity: int
    arrival: int
    departure: Optional[int] = None
    price: Optional[float] = None

    @classmethod
    def for_purchase(cls, segment: Segment, seat_count: int) -> "PurchaseReceipt":
        total = None if segment.price is None else segment.price * seat_count
        return cls(
            segment_id=segment.segment_id,
            origin=segment.origin,
            destination=segment.destination,
            quantity=seat_count,
            arrival=segment.arrival,
            departure=segment.departure,
            price=total,
        )
