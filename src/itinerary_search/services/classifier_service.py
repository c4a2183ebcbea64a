"""
Result Classifier - bucket selection and cheapest/fastest tagging.

All functions are pure: they build new lists and new Itinerary objects
instead of reordering or mutating their inputs.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from src.itinerary_search.ports.path_enumerator import EnumeratedPaths
from src.itinerary_search.schemas.itinerary import (
    Itinerary,
    ItineraryCategory,
    SearchResult,
)

logger = logging.getLogger(__name__)

# Number of legs in a genuine connection through the transit city
CONNECTING_LEGS = 2


def find_winners(bucket: Sequence[Itinerary]) -> Tuple[int, int]:
    """
    Locate the fastest and cheapest entries in one pass.

    The first occurrence wins ties in both criteria.

    Returns:
        Tuple of (fastest index, cheapest index).

    Raises:
        ValueError: If the bucket is empty.
    """
    if not bucket:
        raise ValueError("Cannot pick winners from an empty bucket")

    fastest = cheapest = 0
    for i, itinerary in enumerate(bucket):
        if itinerary.duration < bucket[fastest].duration:
            fastest = i
        if itinerary.total_price < bucket[cheapest].total_price:
            cheapest = i
    return fastest, cheapest


def move_winners_to_front(
    bucket: Sequence[Itinerary], fastest: int, cheapest: int
) -> List[Itinerary]:
    """
    New list with the fastest entry first and the cheapest second.

    When both indices coincide only that entry moves. Every other entry
    keeps its relative order.
    """
    front = [bucket[fastest]]
    if cheapest != fastest:
        front.append(bucket[cheapest])
    rest = [it for i, it in enumerate(bucket) if i not in (fastest, cheapest)]
    return front + rest


def mark_categories(bucket: Sequence[Itinerary]) -> List[Itinerary]:
    """
    Tag the cheapest and fastest entries and move them to the front.

    Returns:
        New list: fastest at index 0, cheapest at index 1 when distinct.
        A single winner of both criteria is tagged CHEAPEST_FASTEST.
        An empty bucket yields an empty list.
    """
    if not bucket:
        return []

    fastest, cheapest = find_winners(bucket)

    tagged = list(bucket)
    if fastest == cheapest:
        tagged[fastest] = tagged[fastest].with_category(ItineraryCategory.CHEAPEST_FASTEST)
    else:
        tagged[fastest] = tagged[fastest].with_category(ItineraryCategory.FASTEST)
        tagged[cheapest] = tagged[cheapest].with_category(ItineraryCategory.CHEAPEST)

    return move_winners_to_front(tagged, fastest, cheapest)


def _fallback(paths: EnumeratedPaths) -> Optional[Itinerary]:
    # Prefer a path honouring the transit city over one that skips it
    if paths.accepted:
        return paths.accepted[0]
    return paths.reached[0] if paths.reached else None


def classify_paths(paths: EnumeratedPaths, transit: Optional[str] = None) -> SearchResult:
    """
    Partition enumerated paths into the direct and connecting buckets.

    Without a transit city the direct bucket holds every one-leg path.
    With one, the connecting bucket holds every accepted two-leg path.
    When the preferred bucket is empty, the first accepted path (for
    example a longer route through the transit city) is returned alone in
    the connecting bucket, untagged, with `is_fallback` set. Only when
    nothing was accepted does the first path that reached the destination
    stand in, transit constraint ignored.

    Args:
        paths: Output of the path enumerator, in discovery order.
        transit: Requested transit city, or None.

    Returns:
        SearchResult; both buckets empty if nothing reached the destination.
    """
    if transit is None:
        preferred = [p for p in paths.accepted if p.is_direct]
        if preferred:
            return SearchResult(direct=tuple(mark_categories(preferred)))
    else:
        preferred = [p for p in paths.accepted if p.num_legs == CONNECTING_LEGS]
        if preferred:
            return SearchResult(connecting=tuple(mark_categories(preferred)))

    fallback = _fallback(paths)
    if fallback is None:
        return SearchResult()

    logger.warning(
        "No %s itinerary found; returning best-effort %d-leg route %s",
        "direct" if transit is None else f"connection via {transit}",
        fallback.num_legs,
        " -> ".join(fallback.cities),
    )
    return SearchResult(connecting=(fallback,), is_fallback=True)
