"""
Inventory repository adapters.
"""

from src.itinerary_search.adapters.data_providers.memory_inventory import (
    InMemoryInventoryRepository,
)
from src.itinerary_search.adapters.data_providers.sqlite_inventory import (
    SqliteInventoryRepository,
)

__all__ = [
    "InMemoryInventoryRepository",
    "SqliteInventoryRepository",
]
