"""
Path Enumerator port interface.

Defines the abstract contract for itinerary search algorithms.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from src.itinerary_search.adapters.repositories.catalogue_index import (
        CatalogueIndex,
    )
    from src.itinerary_search.schemas.itinerary import Itinerary
    from src.pathfinding.deadline import Deadline


@dataclass(frozen=True)
class EnumeratedPaths:
    """
    Itineraries produced by one enumeration, in discovery order.

    Attributes:
        accepted: Itineraries ending at the destination that satisfy the
            transit constraint.
        reached: Every itinerary ending at the destination, transit
            constraint ignored. Feeds the fallback rule.
    """

    accepted: List[Itinerary] = field(default_factory=list)
    reached: List[Itinerary] = field(default_factory=list)


class PathEnumerator(ABC):
    """
    Abstract interface for itinerary enumeration algorithms.

    Implementations:
    - BestFirstPathEnumerator: priority-queue search draining every
      simple path within the layover window
    """

    @abstractmethod
    def find_paths(
        self,
        index: CatalogueIndex,
        origin: str,
        destination: str,
        transit: Optional[str] = None,
        deadline: Optional[Deadline] = None,
    ) -> EnumeratedPaths:
        """
        Enumerate itineraries over a catalogue index.

        Args:
            index: Segments grouped by origin, sorted by departure.
            origin: Starting city.
            destination: Final city.
            transit: City some leg must land in, or None.
            deadline: Request deadline checked inside the search loop.

        Returns:
            EnumeratedPaths with accepted and reached itineraries.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Algorithm identifier.

        Returns:
            Human-readable algorithm name.
        """
        ...
