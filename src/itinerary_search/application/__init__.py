"""
Application layer for the itinerary search engine.

This layer provides the public API. It acts as a facade, handling
dependency initialization and providing a simple interface for consumers.
"""

from src.itinerary_search.application.itinerary_engine import ItineraryEngine

__all__ = ["ItineraryEngine"]
