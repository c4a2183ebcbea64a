"""
Schema definitions for the itinerary search engine.

Pandera-validated DataFrames at the inventory boundary, frozen
dataclasses everywhere else.
"""

from .criteria import SearchCriteria, SortOrder
from .itinerary import Itinerary, ItineraryCategory, PurchaseReceipt, SearchResult
from .segment import (
    Segment,
    SegmentDataFrame,
    SegmentFilter,
    SegmentSchema,
    segments_from_frame,
    segments_to_frame,
)

__all__ = [
    # Segment schemas
    "Segment",
    "SegmentDataFrame",
    "SegmentFilter",
    "SegmentSchema",
    "segments_from_frame",
    "segments_to_frame",
    # Criteria
    "SearchCriteria",
    "SortOrder",
    # Results
    "Itinerary",
    "ItineraryCategory",
    "PurchaseReceipt",
    "SearchResult",
]
