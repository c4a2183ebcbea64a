"""
Port interfaces for the itinerary search engine.

Ports define the abstract interfaces (ABCs) that the domain layer uses to
communicate with external systems. This follows the Ports and Adapters
(Hexagonal) architecture pattern.
"""

from src.itinerary_search.ports.inventory_repository import InventoryRepository
from src.itinerary_search.ports.path_enumerator import EnumeratedPaths, PathEnumerator

__all__ = [
    "EnumeratedPaths",
    "InventoryRepository",
    "PathEnumerator",
]
