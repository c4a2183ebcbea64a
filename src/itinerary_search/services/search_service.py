"""
Itinerary Search Service - Domain orchestrator for itinerary search.

Coordinates the interaction between:
- InventoryRepository (filtered segment snapshot)
- CatalogueIndex (origin index over the snapshot)
- PathEnumerator (algorithm adapter)
- Result classifier and sorter
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Optional, Union

from src.pathfinding.deadline import Deadline

from src.itinerary_search.adapters.repositories.catalogue_index import (
    build_catalogue_index,
)
from src.itinerary_search.schemas.criteria import SearchCriteria, SortOrder
from src.itinerary_search.schemas.itinerary import SearchResult
from src.itinerary_search.services.classifier_service import classify_paths
from src.itinerary_search.services.itinerary_sorter import apply_sort_order

if TYPE_CHECKING:
    from src.itinerary_search.ports.inventory_repository import InventoryRepository
    from src.itinerary_search.ports.path_enumerator import PathEnumerator

logger = logging.getLogger(__name__)


class ItinerarySearchService:
    """
    Domain service for itinerary search.

    Orchestrates one search request:
    1. Validates and normalizes criteria
    2. Fetches a city-independent snapshot from the inventory
    3. Drops unscheduled segments and builds the catalogue index
    4. Delegates enumeration to the algorithm adapter under a deadline
    5. Classifies, then applies an explicit sort if requested

    This service is stateless and thread-safe; each call works on its own
    snapshot, index and queue.

    Attributes:
        _inventory: Segment store.
        _enumerator: Algorithm adapter for path enumeration.
        _timeout: Seconds allowed per search.
    """

    def __init__(
        self,
        inventory: InventoryRepository,
        enumerator: PathEnumerator,
        timeout: Optional[float] = 30.0,
    ) -> None:
        self._inventory = inventory
        self._enumerator = enumerator
        self._timeout = timeout

    def search(
        self,
        origin: str,
        destination: str,
        transit: Optional[str] = None,
        sort_order: Union[str, SortOrder, None] = None,
        min_seats: int = 1,
        departure_from: Optional[int] = None,
        departure_until: Optional[int] = None,
        deadline: Optional[Deadline] = None,
    ) -> SearchResult:
        """
        Find direct or connecting itineraries between two cities.

        Args:
            origin: Starting city.
            destination: Final city.
            transit: City the journey must pass through.
            sort_order: 'asc' / 'desc' by total price, or None.
            min_seats: Minimum free seats on every leg.
            departure_from: Earliest leg departure (epoch seconds).
            departure_until: Latest leg departure (epoch seconds).
            deadline: Overrides the service timeout for this call.

        Returns:
            Classified SearchResult. Empty buckets mean nothing is reachable.

        Raises:
            ValidationError: If criteria are malformed.
            RepositoryError: If the inventory cannot be read.
            SearchTimeoutError: If the deadline expires during enumeration.
        """
        criteria = SearchCriteria.create(
            origin=origin,
            destination=destination,
            transit=transit,
            sort_order=sort_order,
            min_seats=min_seats,
            departure_from=departure_from,
            departure_until=departure_until,
        )
        return self.search_criteria(criteria, deadline=deadline)

    def search_criteria(
        self,
        criteria: SearchCriteria,
        deadline: Optional[Deadline] = None,
    ) -> SearchResult:
        """Run a search from already validated criteria."""
        start_time = time.perf_counter()
        if deadline is None:
            deadline = Deadline(budget=self._timeout)

        logger.debug(
            "Search criteria: origin=%s, destination=%s, transit=%s, sort=%s, min_seats=%d",
            criteria.origin,
            criteria.destination,
            criteria.transit,
            criteria.sort_order,
            criteria.min_seats,
        )

        # 1. Snapshot spanning every city
        fetch_start = time.perf_counter()
        snapshot = self._inventory.find_segments(criteria.to_segment_filter())
        fetch_time = time.perf_counter() - fetch_start

        # 2. Unscheduled segments cannot be indexed
        unscheduled = snapshot["departure"].isna()
        if unscheduled.any():
            logger.warning(
                "Dropping %d segments without a departure time", int(unscheduled.sum())
            )
            snapshot = snapshot[~unscheduled]

        index = build_catalogue_index(snapshot)

        # 3. Enumerate
        algo_start = time.perf_counter()
        paths = self._enumerator.find_paths(
            index=index,
            origin=criteria.origin,
            destination=criteria.destination,
            transit=criteria.transit,
            deadline=deadline,
        )
        algo_time = time.perf_counter() - algo_start

        # 4. Classify, then explicit sort supersedes front placement
        result = classify_paths(paths, transit=criteria.transit)
        result = apply_sort_order(result, criteria.sort_order)

        total_time = time.perf_counter() - start_time

        logger.info(
            "Itinerary search %s -> %s completed: %d direct, %d connecting%s in %.3fms "
            "(fetch: %.3fms, algo: %.3fms)",
            criteria.origin,
            criteria.destination,
            len(result.direct),
            len(result.connecting),
            " (fallback)" if result.is_fallback else "",
            total_time * 1000,
            fetch_time * 1000,
            algo_time * 1000,
        )

        return result

    @property
    def algorithm_name(self) -> str:
        """Get name of the underlying algorithm."""
        return self._enumerator.name
