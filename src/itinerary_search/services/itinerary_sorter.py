"""Explicit price ordering of classified result buckets."""

from dataclasses import replace
from typing import List, Optional, Sequence

from src.itinerary_search.schemas.criteria import SortOrder
from src.itinerary_search.schemas.itinerary import Itinerary, SearchResult


def sort_itineraries(bucket: Sequence[Itinerary], order: SortOrder) -> List[Itinerary]:
    """
    Stable sort of a bucket by total price.

    Equal prices keep their classified order in both directions. Category
    tags travel with their itineraries.
    """
    return sorted(
        bucket,
        key=lambda itinerary: itinerary.total_price,
        reverse=order is SortOrder.DESC,
    )


def apply_sort_order(result: SearchResult, order: Optional[SortOrder]) -> SearchResult:
    """Sort both buckets when an order was requested; otherwise pass through."""
    if order is None:
        return result
    return replace(
        result,
        direct=tuple(sort_itineraries(result.direct, order)),
        connecting=tuple(sort_itineraries(result.connecting, order)),
    )
