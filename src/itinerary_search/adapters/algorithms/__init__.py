"""
Algorithm adapters for itinerary search.
"""

from src.itinerary_search.adapters.algorithms.best_first_adapter import (
    BestFirstPathEnumerator,
)

__all__ = ["BestFirstPathEnumerator"]
