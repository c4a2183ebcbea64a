"""
Domain services for the itinerary search engine.

Services orchestrate the interaction between ports (inventory, algorithm)
and domain logic (criteria validation, classification, sorting, purchase).
"""

from src.itinerary_search.services.classifier_service import (
    classify_paths,
    mark_categories,
    move_winners_to_front,
)
from src.itinerary_search.services.itinerary_sorter import (
    apply_sort_order,
    sort_itineraries,
)
from src.itinerary_search.services.purchase_service import PurchaseService
from src.itinerary_search.services.search_service import ItinerarySearchService

__all__ = [
    "ItinerarySearchService",
    "PurchaseService",
    "apply_sort_order",
    "classify_paths",
    "mark_categories",
    "move_winners_to_front",
    "sort_itineraries",
]
