"""
Best-First Enumerator Adapter - Bridge between architecture and algorithm.

Wraps the pathfinding module and converts Candidate output to
Itinerary schema objects.
"""

import logging
from typing import List, Optional

from src.pathfinding.alg import MAX_LAYOVER_SECONDS, enumerate_paths
from src.pathfinding.candidates import Candidate
from src.pathfinding.deadline import Deadline

from src.itinerary_search.adapters.repositories.catalogue_index import CatalogueIndex
from src.itinerary_search.ports.path_enumerator import EnumeratedPaths, PathEnumerator
from src.itinerary_search.schemas.itinerary import Itinerary

logger = logging.getLogger(__name__)


class BestFirstPathEnumerator(PathEnumerator):
    """
    Adapter for the pathfinding enumerator.

    Attributes:
        _max_layover: Longest connection wait in seconds.
    """

    def __init__(self, max_layover: int = MAX_LAYOVER_SECONDS) -> None:
        self._max_layover = max_layover

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "Best-First Path Enumeration"

    def find_paths(
        self,
        index: CatalogueIndex,
        origin: str,
        destination: str,
        transit: Optional[str] = None,
        deadline: Optional[Deadline] = None,
    ) -> EnumeratedPaths:
        """
        Enumerate itineraries over the catalogue index.

        Raises:
            InvalidCityError: If a city argument is malformed.
            SearchTimeoutError: If the deadline expires mid-search.
        """
        result = enumerate_paths(
            segments_by_city=index.segments_by_city,
            origin=origin,
            destination=destination,
            transit=transit,
            deadline=deadline,
            max_layover=self._max_layover,
        )

        logger.debug(
            "Enumerated %s -> %s (via %s): %d accepted, %d reached, %d expanded",
            origin,
            destination,
            transit,
            len(result.accepted),
            len(result.reached),
            result.expanded,
        )

        return EnumeratedPaths(
            accepted=self._to_itineraries(result.accepted),
            reached=self._to_itineraries(result.reached),
        )

    def _to_itineraries(self, candidates: List[Candidate]) -> List[Itinerary]:
        # Candidates are connected and repeat-free by construction
        return [Itinerary(legs=candidate.legs) for candidate in candidates]
