"""
Best-first enumeration of every simple path between two cities.

Unlike a classic shortest-path Dijkstra, acceptance never halts the
search: the queue is drained so that all qualifying paths are collected
and the cheapest and fastest can be picked out afterwards.
"""

from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Sequence

from .candidates import Candidate, CandidateQueue, Leg
from .deadline import Deadline
from .validation import validate_enumeration_inputs

# Longest allowed wait between arriving and boarding the next leg
MAX_LAYOVER_SECONDS = 24 * 60 * 60


@dataclass
class EnumerationResult:
    """
    Output of a single enumeration run.

    Attributes:
        accepted: Paths reaching the destination that satisfy the transit
            constraint, in pop order (non-decreasing duration).
        reached: Every path reaching the destination regardless of the
            transit constraint, in pop order.
        expanded: Number of candidates popped from the queue.
    """

    accepted: List[Candidate] = field(default_factory=list)
    reached: List[Candidate] = field(default_factory=list)
    expanded: int = 0


def connection_wait(current: Leg, following: Leg) -> int:
    """Seconds between landing on `current` and boarding `following`."""
    return following.departure - current.arrival


def enumerate_paths(
    segments_by_city: Mapping[str, Sequence[Leg]],
    origin: str,
    destination: str,
    transit: Optional[str] = None,
    deadline: Optional[Deadline] = None,
    max_layover: int = MAX_LAYOVER_SECONDS,
) -> EnumerationResult:
    """
    Enumerate all simple paths from origin to destination.

    Args:
        segments_by_city: Pre-computed mapping of origin city to segments,
            each list sorted by departure.
        origin: City the journey starts from.
        destination: City the journey must end in.
        transit: City some leg must land in, or None.
        deadline: Checked once per popped candidate.
        max_layover: Longest allowed connection wait in seconds.

    Returns:
        EnumerationResult with accepted and reached paths.

    Raises:
        InvalidCityError: If a city argument is malformed.
        MissingDepartureError: If a segment has no departure time.
        SearchTimeoutError: If the deadline expires mid-search.
    """
    validate_enumeration_inputs(segments_by_city, origin, destination, transit)

    if deadline is None:
        deadline = Deadline.never()

    pq = CandidateQueue()
    for segment in segments_by_city.get(origin, ()):
        pq.push(Candidate.seed(segment))

    result = EnumerationResult()

    while pq:
        deadline.check()

        candidate = pq.pop()
        result.expanded += 1
        last = candidate.last_leg

        if last.destination == destination:
            result.reached.append(candidate)
            if transit is None or candidate.visits(transit):
                result.accepted.append(candidate)
            continue

        for segment in segments_by_city.get(last.destination, ()):
            wait = connection_wait(last, segment)
            if wait > max_layover:
                # Sorted by departure: every later segment waits even longer
                break
            if wait < 0 or candidate.contains(segment.segment_id):
                continue

            pq.push(candidate.extend(segment))

    return result
