"""
Inventory Repository port interface.

Defines the abstract contract for the store that owns segment records.
Implementations handle the specifics of different backends (SQL, memory).
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.itinerary_search.schemas.segment import (
    Segment,
    SegmentDataFrame,
    SegmentFilter,
)


class InventoryRepository(ABC):
    """
    Abstract interface for segment inventories.

    Reads return validated DataFrames - schema validation happens here at
    the boundary, not per-row in the search. The only write the search
    engine needs is the atomic seat decrement.

    Implementations:
    - SqliteInventoryRepository: SQLite table with conditional UPDATE
    - InMemoryInventoryRepository: lock-guarded dict for tests and demos
    """

    @abstractmethod
    def find_segments(self, segment_filter: SegmentFilter) -> SegmentDataFrame:
        """
        Return segments matching the filter as a flat, unsorted DataFrame.

        Args:
            segment_filter: City pair (optional), minimum seats, departure
                window and identity.

        Returns:
            DataFrame validated against SegmentSchema.

        Raises:
            RepositoryError: If the store cannot be read or returns rows
                that fail validation.
        """
        ...

    @abstractmethod
    def get_segment(self, segment_id: str) -> Optional[Segment]:
        """
        Return the current state of one segment.

        Returns:
            The Segment, or None if the identity is unknown.

        Raises:
            RepositoryError: If the store cannot be read.
        """
        ...

    @abstractmethod
    def decrement_seats(self, segment_id: str, count: int) -> bool:
        """
        Atomically take `count` seats from a segment.

        Must be a single conditional operation: the stored quantity is
        decremented only if it is still >= count.

        Returns:
            True if seats were taken, False if the segment is missing or
            no longer has enough seats.

        Raises:
            RepositoryError: If the store cannot be written.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Human-readable name of this repository.

        Returns:
            Repository identifier (e.g., "SQLite", "In-Memory").
        """
        ...

    def close(self) -> None:
        """Release held resources. Default implementation holds none."""
        return None
