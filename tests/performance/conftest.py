"""
Shared fixtures for performance benchmarks.

Synthetic catalogues are generated once per module from a fixed seed,
then only the hot paths are benchmarked.
"""

import numpy as np
import pytest

from src.itinerary_search.adapters.algorithms.best_first_adapter import (
    BestFirstPathEnumerator,
)
from src.itinerary_search.adapters.data_providers.memory_inventory import (
    InMemoryInventoryRepository,
)
from src.itinerary_search.adapters.repositories.catalogue_index import CatalogueIndex
from src.itinerary_search.schemas.segment import Segment, segments_to_frame
from src.itinerary_search.services.search_service import ItinerarySearchService

CITIES = ["MOW", "LED", "KZN", "KUF", "GOJ", "SVX", "OVB", "AER"]
HOUR = 3600


def synthetic_segments(n: int, horizon_hours: int, seed: int = 42) -> list[Segment]:
    rng = np.random.default_rng(seed)
    origins = rng.integers(0, len(CITIES), size=n)
    shifts = rng.integers(1, len(CITIES), size=n)
    departures = rng.integers(0, horizon_hours * HOUR, size=n)
    durations = rng.integers(1 * HOUR, 6 * HOUR, size=n)
    prices = rng.uniform(1000, 20000, size=n).round(2)

    return [
        Segment(
            segment_id=f"seg-{i}",
            origin=CITIES[origins[i]],
            destination=CITIES[(origins[i] + shifts[i]) % len(CITIES)],
            quantity=int(rng.integers(1, 200)),
            departure=int(departures[i]),
            arrival=int(departures[i] + durations[i]),
            price=float(prices[i]),
        )
        for i in range(n)
    ]


@pytest.fixture(scope="module")
def large_snapshot():
    """Wide snapshot for index construction (module-scoped)."""
    return segments_to_frame(synthetic_segments(5000, horizon_hours=24 * 30))


@pytest.fixture(scope="module")
def search_segments() -> list[Segment]:
    """Sparse week-long catalogue keeping enumeration tractable."""
    return synthetic_segments(80, horizon_hours=24 * 7)


@pytest.fixture(scope="module")
def search_index(search_segments) -> CatalogueIndex:
    return CatalogueIndex.from_segments(search_segments)


@pytest.fixture(scope="module")
def enumerator() -> BestFirstPathEnumerator:
    return BestFirstPathEnumerator()


@pytest.fixture(scope="module")
def search_service(search_segments, enumerator) -> ItinerarySearchService:
    return ItinerarySearchService(
        inventory=InMemoryInventoryRepository(search_segments),
        enumerator=enumerator,
    )
