"""Shared fixtures: small hand-built catalogues used across test packages."""

from typing import Optional

import pytest

from src.itinerary_search.schemas.segment import Segment


def _make_segment(
    segment_id: str,
    origin: str,
    destination: str,
    departure: Optional[int],
    arrival: int,
    price: Optional[float] = None,
    quantity: int = 10,
) -> Segment:
    return Segment(
        segment_id=segment_id,
        origin=origin,
        destination=destination,
        quantity=quantity,
        arrival=arrival,
        departure=departure,
        price=price,
    )


@pytest.fixture
def make_segment():
    """Factory for Segment records with a readable positional signature."""
    return _make_segment


@pytest.fixture
def scenario_a_segments() -> list[Segment]:
    """
    A -> B -> C is cheaper and faster than the direct A -> C.

    A->B dep=1000 arr=2000 price=100
    B->C dep=2100 arr=3000 price=50
    A->C dep=1000 arr=5000 price=200
    """
    return [
        _make_segment("AB", "A", "B", 1000, 2000, 100),
        _make_segment("BC", "B", "C", 2100, 3000, 50),
        _make_segment("AC", "A", "C", 1000, 5000, 200),
    ]
