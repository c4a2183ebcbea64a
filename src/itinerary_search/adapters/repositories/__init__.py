"""
Search-side index over inventory snapshots.
"""

from src.itinerary_search.adapters.repositories.catalogue_index import (
    CatalogueIndex,
    CityBounds,
    build_catalogue_index,
    build_city_bounds,
)

__all__ = [
    "CatalogueIndex",
    "CityBounds",
    "build_catalogue_index",
    "build_city_bounds",
]
