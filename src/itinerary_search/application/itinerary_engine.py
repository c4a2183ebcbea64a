"""
ItineraryEngine - Public API for itinerary search and seat purchase.

This module provides the main entry point for the search engine. It acts
as a Facade/Factory, wiring the inventory, algorithm and services with
sensible defaults.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from src.itinerary_search.adapters.algorithms.best_first_adapter import (
    BestFirstPathEnumerator,
)
from src.itinerary_search.adapters.data_providers.sqlite_inventory import (
    SqliteInventoryRepository,
)
from src.itinerary_search.config import Settings
from src.itinerary_search.ports.inventory_repository import InventoryRepository
from src.itinerary_search.ports.path_enumerator import PathEnumerator
from src.itinerary_search.schemas.criteria import SortOrder
from src.itinerary_search.schemas.itinerary import PurchaseReceipt, SearchResult
from src.itinerary_search.services.purchase_service import PurchaseService
from src.itinerary_search.services.search_service import ItinerarySearchService

logger = logging.getLogger(__name__)


class ItineraryEngine:
    """
    Public API for itinerary search and purchase.

    Example usage:
        >>> engine = ItineraryEngine(db_path="data/segments.db")
        >>> result = engine.search("Moscow", "Kazan", transit="Samara")
        >>> for itinerary in result.connecting:
        ...     print(itinerary.cities, itinerary.total_price, itinerary.category)
        >>> receipt = engine.buy(result.connecting[0].segment_ids[0], 2)

    Attributes:
        _search_service: Underlying ItinerarySearchService.
        _purchase_service: Underlying PurchaseService.
        _inventory: Segment store (closed on shutdown).
    """

    def __init__(
        self,
        db_path: Optional[Union[str, Path]] = None,
        inventory: Optional[InventoryRepository] = None,
        enumerator: Optional[PathEnumerator] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        """
        Initialize the engine with optional custom dependencies.

        Args:
            db_path: SQLite database path. Defaults to the configured path.
            inventory: Custom inventory. If None, uses SqliteInventoryRepository.
            enumerator: Custom algorithm. If None, uses BestFirstPathEnumerator.
            settings: Configuration. If None, loaded from the environment.
        """
        self._settings = settings or Settings()

        if inventory is not None:
            self._inventory = inventory
        else:
            self._inventory = SqliteInventoryRepository(
                db_path=db_path or self._settings.storage.database_path,
                table_name=self._settings.storage.table_name,
            )

        self._enumerator = enumerator or BestFirstPathEnumerator()

        self._search_service = ItinerarySearchService(
            inventory=self._inventory,
            enumerator=self._enumerator,
            timeout=self._settings.search.request_timeout_seconds,
        )
        self._purchase_service = PurchaseService(self._inventory)

        logger.info(
            "ItineraryEngine initialized with %s inventory and %s algorithm",
            self._inventory.name,
            self._enumerator.name,
        )

    def search(
        self,
        origin: str,
        destination: str,
        transit: Optional[str] = None,
        sort_order: Union[str, SortOrder, None] = None,
        min_seats: Optional[int] = None,
        departure_from: Optional[int] = None,
        departure_until: Optional[int] = None,
    ) -> SearchResult:
        """
        Search itineraries between two cities.

        Args:
            origin: Starting city.
            destination: Final city.
            transit: City the journey must pass through.
            sort_order: 'asc' or 'desc' by total price.
            min_seats: Minimum free seats per leg (defaults to config).
            departure_from: Earliest leg departure (epoch seconds).
            departure_until: Latest leg departure (epoch seconds).

        Returns:
            SearchResult with direct and connecting buckets.
        """
        if min_seats is None:
            min_seats = self._settings.search.default_min_seats

        return self._search_service.search(
            origin=origin,
            destination=destination,
            transit=transit,
            sort_order=sort_order,
            min_seats=min_seats,
            departure_from=departure_from,
            departure_until=departure_until,
        )

    def buy(self, segment_id: str, seat_count: int) -> PurchaseReceipt:
        """
        Buy seats on a segment.

        Returns:
            Receipt for the purchased slice.
        """
        return self._purchase_service.buy(segment_id, seat_count)

    @property
    def algorithm_name(self) -> str:
        """Get the name of the enumeration algorithm being used."""
        return self._search_service.algorithm_name

    def shutdown(self) -> None:
        """Close the inventory connection."""
        self._inventory.close()
        logger.info("ItineraryEngine shutdown complete")

    def __enter__(self) -> "ItineraryEngine":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit with cleanup."""
        self.shutdown()
