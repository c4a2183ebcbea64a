"""
Purchase Service - seat purchase against the inventory.

The availability pre-check here is only a fast path. Correctness under
concurrent buyers comes from the repository's conditional decrement.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from src.itinerary_search.exceptions import (
    InsufficientInventoryError,
    InvalidSeatCountError,
    SegmentNotFoundError,
)
from src.itinerary_search.schemas.itinerary import PurchaseReceipt

if TYPE_CHECKING:
    from src.itinerary_search.ports.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class PurchaseService:
    """Sells seats on a single segment."""

    def __init__(self, inventory: InventoryRepository) -> None:
        self._inventory = inventory

    def buy(self, segment_id: str, seat_count: int) -> PurchaseReceipt:
        """
        Buy `seat_count` seats on a segment.

        Args:
            segment_id: Segment identity.
            seat_count: Seats to buy (>= 1).

        Returns:
            Receipt for the purchased slice: quantity is the seat count,
            price is price per seat times seat count.

        Raises:
            InvalidSeatCountError: If seat_count is not a positive integer.
            SegmentNotFoundError: If the segment does not exist.
            InsufficientInventoryError: If not enough seats remain, either at
                the pre-check or because a concurrent buyer took them first.
            RepositoryError: If the inventory fails.
        """
        if isinstance(seat_count, bool) or not isinstance(seat_count, int) or seat_count < 1:
            raise InvalidSeatCountError(seat_count)

        segment = self._inventory.get_segment(segment_id)
        if segment is None:
            raise SegmentNotFoundError(segment_id)

        if seat_count > segment.quantity:
            raise InsufficientInventoryError(
                segment_id, requested=seat_count, available=segment.quantity
            )

        if not self._inventory.decrement_seats(segment_id, seat_count):
            logger.warning(
                "Seat decrement rejected for %s (%d seats): inventory changed since check",
                segment_id,
                seat_count,
            )
            raise InsufficientInventoryError(segment_id, requested=seat_count)

        receipt = PurchaseReceipt.for_purchase(segment, seat_count)
        logger.info(
            "Purchased %d seat(s) on %s (%s -> %s) for %s",
            seat_count,
            segment_id,
            segment.origin,
            segment.destination,
            receipt.price,
        )
        return receipt
