import heapq
import itertools
from dataclasses import dataclass
from typing import List, Optional, Protocol, Tuple


class Leg(Protocol):
    """Structural type of a flight segment as seen by the search."""

    segment_id: str
    origin: str
    destination: str
    departure: Optional[int]
    arrival: int
    price: Optional[float]


@dataclass(frozen=True)
class Candidate:
    """
    Represents a (possibly partial) path in the search space.

    Each Candidate tracks:
    - The ordered legs flown so far
    - Total price accumulated (absent leg prices count as zero)

    Duration is derived: last leg arrival minus first leg departure.
    Candidates are immutable; extending one returns a new Candidate.
    """

    legs: Tuple[Leg, ...]
    total_price: float

    @classmethod
    def seed(cls, leg: Leg) -> "Candidate":
        """One-leg candidate for a segment leaving the origin."""
        return cls(legs=(leg,), total_price=float(leg.price or 0))

    def extend(self, leg: Leg) -> "Candidate":
        return Candidate(
            legs=self.legs + (leg,),
            total_price=self.total_price + float(leg.price or 0),
        )

    @property
    def last_leg(self) -> Leg:
        return self.legs[-1]

    @property
    def first_departure(self) -> int:
        return self.legs[0].departure

    @property
    def last_arrival(self) -> int:
        return self.legs[-1].arrival

    @property
    def duration(self) -> int:
        return self.last_arrival - self.first_departure

    def contains(self, segment_id: str) -> bool:
        """Check if a segment identity is already used in this path."""
        return any(leg.segment_id == segment_id for leg in self.legs)

    def visits(self, city: str) -> bool:
        """Check if any leg lands in the given city."""
        return any(leg.destination == city for leg in self.legs)

    def __len__(self) -> int:
        return len(self.legs)


class CandidateQueue:
    """
    Binary min-heap of candidates ordered by (duration, total_price).

    A monotonically increasing sequence number breaks the remaining ties,
    so candidates with equal keys pop in insertion order and heapq never
    has to compare Candidate objects.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[int, float, int, Candidate]] = []
        self._counter = itertools.count()

    def push(self, candidate: Candidate) -> None:
        heapq.heappush(
            self._heap,
            (candidate.duration, candidate.total_price, next(self._counter), candidate),
        )

    def pop(self) -> Candidate:
        return heapq.heappop(self._heap)[-1]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
