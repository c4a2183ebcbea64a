"""
Catalogue Index - per-request origin index over a segment snapshot.

Implements the search-side view of the inventory:
- Numpy-vectorized city boundary detection on a sorted DataFrame
- Immutable Segment tuples per origin, ascending by departure
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Sequence, Tuple

import numpy as np
import pandas as pd

from src.itinerary_search.exceptions import MissingDepartureError
from src.itinerary_search.schemas.segment import (
    Segment,
    segments_from_frame,
    segments_to_frame,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CityBounds:
    """
    Row range of one origin city in the sorted snapshot.

    Attributes:
        start: First row (inclusive).
        end: Last row (exclusive).
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate index bounds."""
        if self.start < 0:
            raise ValueError(f"start must be >= 0, got {self.start}")
        if self.end < self.start:
            raise ValueError(f"end ({self.end}) must be >= start ({self.start})")


def build_city_bounds(df: pd.DataFrame) -> Dict[str, CityBounds]:
    """
    Find each origin's row range using vectorized numpy operations.

    Args:
        df: DataFrame MUST be pre-sorted by 'origin' with a reset index.

    Returns:
        Dict mapping origin city to its CityBounds.

    Example:
        >>> df = pd.DataFrame({"origin": ["A", "A", "B", "C", "C"]})
        >>> build_city_bounds(df)["C"]
        CityBounds(start=3, end=5)
    """
    if df.empty:
        return {}

    cities = df["origin"].to_numpy()
    n = len(cities)

    # True wherever a row starts a new city block
    change_mask = np.concatenate([[True], cities[1:] != cities[:-1]])
    change_indices = np.flatnonzero(change_mask)

    bounds: Dict[str, CityBounds] = {}
    num_boundaries = len(change_indices)
    for i in range(num_boundaries):
        start = int(change_indices[i])
        end = int(change_indices[i + 1]) if i + 1 < num_boundaries else n
        bounds[str(cities[start])] = CityBounds(start=start, end=end)

    return bounds


@dataclass(frozen=True)
class CatalogueIndex:
    """
    Segments grouped by origin city, each group sorted by departure.

    Attributes:
        segments_by_city: Origin city -> outbound segments.
    """

    segments_by_city: Dict[str, Tuple[Segment, ...]] = field(default_factory=dict)

    def segments_from(self, city: str) -> Tuple[Segment, ...]:
        """Outbound segments of a city, empty if it has none."""
        return self.segments_by_city.get(city, ())

    def has_city(self, city: str) -> bool:
        """Check if city has any departing segments."""
        return city in self.segments_by_city

    @property
    def cities(self) -> FrozenSet[str]:
        """All cities with at least one departing segment."""
        return frozenset(self.segments_by_city)

    @property
    def segment_count(self) -> int:
        return sum(len(group) for group in self.segments_by_city.values())

    @classmethod
    def from_segments(cls, segments: Sequence[Segment]) -> "CatalogueIndex":
        """Build an index directly from Segment records."""
        return build_catalogue_index(segments_to_frame(segments))


def build_catalogue_index(segments_df: pd.DataFrame) -> CatalogueIndex:
    """
    Build the origin index from a SegmentSchema-shaped snapshot.

    Steps:
    1. Reject rows without a departure (contract violation here)
    2. Sort by (origin, departure), stable so ties keep inventory order
    3. Find city boundaries and slice out immutable Segment tuples

    Args:
        segments_df: Flat, unsorted segment DataFrame.

    Returns:
        CatalogueIndex over every origin in the snapshot.

    Raises:
        MissingDepartureError: If any row lacks a departure time.
    """
    if segments_df.empty:
        return CatalogueIndex()

    missing = segments_df["departure"].isna()
    if missing.any():
        raise MissingDepartureError(str(segments_df.loc[missing, "segment_id"].iloc[0]))

    ordered = segments_df.sort_values(
        ["origin", "departure"], kind="mergesort"
    ).reset_index(drop=True)

    bounds = build_city_bounds(ordered)
    segments = segments_from_frame(ordered)

    index = CatalogueIndex(
        segments_by_city={
            city: tuple(segments[b.start : b.end]) for city, b in bounds.items()
        }
    )

    logger.debug(
        "Catalogue index built: %d segments across %d origin cities",
        len(segments),
        len(bounds),
    )

    return index
