"""
Segment data schemas.

Defines the core contract for flight segments flowing through the system:
a Pandera DataFrame model validated at the inventory boundary and an
immutable Segment record used by the search.
"""

import uuid
from dataclasses import dataclass
from typing import List, Optional, Sequence

import pandas as pd
import pandera as pa
from pandera.typing import DataFrame, Series

from src.itinerary_search.exceptions import (
    InvalidSeatCountError,
    InvalidSegmentTimesError,
    InvalidTimeWindowError,
)

SEGMENT_COLUMNS = [
    "segment_id",
    "origin",
    "destination",
    "quantity",
    "price",
    "departure",
    "arrival",
]


class SegmentSchema(pa.DataFrameModel):
    """
    Inventory contract - one row per flight segment.

    Times are epoch seconds. Departure and price are nullable: a missing
    departure keeps the row out of the catalogue index, a missing price
    counts as zero in totals. Stored as float so NaN can mark absence.
    """

    segment_id: Series[str] = pa.Field(
        nullable=False,
        unique=True,
        description="Segment identity (UUID string)",
    )
    origin: Series[str] = pa.Field(
        nullable=False,
        description="Departure city",
    )
    destination: Series[str] = pa.Field(
        nullable=False,
        description="Arrival city",
    )
    quantity: Series[int] = pa.Field(
        ge=0,
        description="Seats still available",
    )
    price: Series[float] = pa.Field(
        nullable=True,
        ge=0,
        description="Price per seat",
    )
    departure: Series[float] = pa.Field(
        nullable=True,
        description="Departure time in epoch seconds",
    )
    arrival: Series[float] = pa.Field(
        nullable=False,
        description="Arrival time in epoch seconds",
    )

    class Config:
        strict = False
        coerce = True
        name = "SegmentSchema"
        description = "Flight segment inventory rows"

    @pa.dataframe_check
    def departure_before_arrival(cls, df: pd.DataFrame) -> Series[bool]:
        """Known departures must strictly precede arrival."""
        return df["departure"].isna() | (df["departure"] < df["arrival"])


SegmentDataFrame = DataFrame[SegmentSchema]


@dataclass(frozen=True)
class Segment:
    """
    Immutable flight segment.

    Attributes:
        segment_id: Identity, unique across the inventory.
        origin: Departure city.
        destination: Arrival city.
        quantity: Seats still available.
        arrival: Arrival time (epoch seconds).
        departure: Departure time (epoch seconds), None if unscheduled.
        price: Price per seat, None if unset.
    """

    segment_id: str
    origin: str
    destination: str
    quantity: int
    arrival: int
    departure: Optional[int] = None
    price: Optional[float] = None

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise InvalidSeatCountError(self.quantity, minimum=0)
        if self.departure is not None and self.departure >= self.arrival:
            raise InvalidSegmentTimesError(
                self.segment_id, self.departure, self.arrival
            )
        if self.price is not None and self.price < 0:
            raise ValueError(f"price must be >= 0, got {self.price}")

    @classmethod
    def create(
        cls,
        origin: str,
        destination: str,
        arrival: int,
        departure: Optional[int] = None,
        price: Optional[float] = None,
        quantity: int = 0,
        segment_id: Optional[str] = None,
    ) -> "Segment":
        """Factory assigning a fresh UUID when no identity is given."""
        return cls(
            segment_id=segment_id or str(uuid.uuid4()),
            origin=origin,
            destination=destination,
            quantity=quantity,
            arrival=arrival,
            departure=departure,
            price=price,
        )

    @property
    def duration(self) -> Optional[int]:
        """Flight time in seconds, None without a departure."""
        if self.departure is None:
            return None
        return self.arrival - self.departure


@dataclass(frozen=True)
class SegmentFilter:
    """
    Inventory query parameters.

    The city pair is all-or-nothing: an origin without a destination
    would silently widen the query. The departure window is inclusive.
    """

    origin: Optional[str] = None
    destination: Optional[str] = None
    min_quantity: int = 1
    departure_from: Optional[int] = None
    departure_until: Optional[int] = None
    segment_id: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.origin is None) != (self.destination is None):
            raise ValueError("origin and destination must be given together")
        if self.min_quantity < 0:
            raise InvalidSeatCountError(self.min_quantity, minimum=0)
        if (
            self.departure_from is not None
            and self.departure_until is not None
            and self.departure_from > self.departure_until
        ):
            raise InvalidTimeWindowError(self.departure_from, self.departure_until)

    def matches(self, segment: Segment) -> bool:
        """Row-level predicate, shared by in-process adapters."""
        if self.segment_id is not None and segment.segment_id != self.segment_id:
            return False
        if segment.quantity < self.min_quantity:
            return False
        if self.origin is not None and (
            segment.origin != self.origin or segment.destination != self.destination
        ):
            return False
        if self.departure_from is not None or self.departure_until is not None:
            if segment.departure is None:
                return False
            if self.departure_from is not None and segment.departure < self.departure_from:
                return False
            if self.departure_until is not None and segment.departure > self.departure_until:
                return False
        return True


def _optional_int(value) -> Optional[int]:
    return None if pd.isna(value) else int(value)


def _optional_float(value) -> Optional[float]:
    return None if pd.isna(value) else float(value)


def segments_to_frame(segments: Sequence[Segment]) -> pd.DataFrame:
    """Build a SegmentSchema-shaped DataFrame from Segment records."""
    return pd.DataFrame(
        {
            "segment_id": [s.segment_id for s in segments],
            "origin": [s.origin for s in segments],
            "destination": [s.destination for s in segments],
            "quantity": [s.quantity for s in segments],
            "price": [s.price for s in segments],
            "departure": [s.departure for s in segments],
            "arrival": [s.arrival for s in segments],
        },
        columns=SEGMENT_COLUMNS,
    ).astype({"price": float, "departure": float, "arrival": float})


def segments_from_frame(df: pd.DataFrame) -> List[Segment]:
    """
    Materialize Segment records from a SegmentSchema-shaped DataFrame.

    Columns are pulled out as numpy arrays once instead of iterating rows
    as pd.Series objects.
    """
    if df.empty:
        return []

    ids = df["segment_id"].to_numpy()
    origins = df["origin"].to_numpy()
    destinations = df["destination"].to_numpy()
    quantities = df["quantity"].to_numpy()
    prices = df["price"].to_numpy()
    departures = df["departure"].to_numpy()
    arrivals = df["arrival"].to_numpy()

    return [
        Segment(
            segment_id=str(ids[i]),
            origin=str(origins[i]),
            destination=str(destinations[i]),
            quantity=int(quantities[i]),
            arrival=int(arrivals[i]),
            departure=_optional_int(departures[i]),
            price=_optional_float(prices[i]),
        )
        for i in range(len(df))
    ]
