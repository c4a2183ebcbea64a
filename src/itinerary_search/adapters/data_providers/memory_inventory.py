"""
In-memory Inventory Repository.

Lock-guarded dict of segments. Used by tests, demos, and as the
reference behavior the SQL adapter has to match.
"""

import logging
import threading
from dataclasses import replace
from typing import Dict, Iterable, Optional

from src.itinerary_search.ports.inventory_repository import InventoryRepository
from src.itinerary_search.schemas.segment import (
    Segment,
    SegmentDataFrame,
    SegmentFilter,
    SegmentSchema,
    segments_to_frame,
)

logger = logging.getLogger(__name__)


class InMemoryInventoryRepository(InventoryRepository):
    """
    Inventory kept in process memory.

    The availability check and the decrement happen under one lock, so
    concurrent buyers can never take the same seats twice.
    """

    def __init__(self, segments: Iterable[Segment] = ()) -> None:
        self._segments: Dict[str, Segment] = {}
        self._lock = threading.Lock()
        self.add_segments(segments)

    def add_segments(self, segments: Iterable[Segment]) -> None:
        """
        Seed the inventory.

        Raises:
            ValueError: If a segment identity is already stored.
        """
        with self._lock:
            for segment in segments:
                if segment.segment_id in self._segments:
                    raise ValueError(f"Duplicate segment id: {segment.segment_id}")
                self._segments[segment.segment_id] = segment

    def find_segments(self, segment_filter: SegmentFilter) -> SegmentDataFrame:
        with self._lock:
            rows = [s for s in self._segments.values() if segment_filter.matches(s)]

        logger.debug("In-memory query matched %d of %d segments", len(rows), len(self._segments))
        return SegmentSchema.validate(segments_to_frame(rows))

    def get_segment(self, segment_id: str) -> Optional[Segment]:
        with self._lock:
            return self._segments.get(segment_id)

    def decrement_seats(self, segment_id: str, count: int) -> bool:
        with self._lock:
            segment = self._segments.get(segment_id)
            if segment is None or segment.quantity < count:
                return False
            self._segments[segment_id] = replace(
                segment, quantity=segment.quantity - count
            )
            return True

    @property
    def name(self) -> str:
        """Human-readable repository name."""
        return "In-Memory"

    def __len__(self) -> int:
        return len(self._segments)
