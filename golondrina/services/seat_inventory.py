"""
Seat inventory using per-flight occupancy bitmaps.

This module implements seat allocation for the ticket office:
- One dense occupancy bitmap per flight type covering seats 1..250
- Class sub-ranges (first 1-20, economy 21-250) applied to every lookup
- Randomized allocation with a bounded number of draws
- Deterministic linear-scan fallback so a free seat is always found
"""

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..exceptions import NoSeatAvailableError, SeatUnavailableError
from ..models.enums import FlightType, TicketClass
from ..models.seat import SEAT_CAPACITY, SeatRangeModel, CLASS_SEAT_RANGES

logger = logging.getLogger(__name__)

DEFAULT_RANDOM_ATTEMPTS = 1000


@dataclass
class SeatLayout:
    """Aircraft seating layout shared by both routes."""
    total_seats: int
    class_ranges: Dict[TicketClass, SeatRangeModel]

    @classmethod
    def get_default_layout(cls) -> "SeatLayout":
        """Standard layout: 20 first class seats, 230 economy seats."""
        return cls(total_seats=SEAT_CAPACITY, class_ranges=dict(CLASS_SEAT_RANGES))

    def seat_range(self, ticket_class: TicketClass) -> Tuple[int, int]:
        seat_range = self.class_ranges[ticket_class]
        return seat_range.start, seat_range.end

    def contains(self, ticket_class: TicketClass, seat_number: int) -> bool:
        return self.class_ranges[ticket_class].contains(seat_number)

    def is_valid_seat(self, seat_number: int) -> bool:
        return 1 <= seat_number <= self.total_seats


class SeatInventory:
    """
    Seat occupancy tables partitioned by flight type and ticket class.

    Each flight type owns a bytearray indexed by raw seat number
    (index 0 unused; 0 = available, 1 = occupied).
    """

    def __init__(
        self,
        layout: Optional[SeatLayout] = None,
        random_attempts: int = DEFAULT_RANDOM_ATTEMPTS,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the seat inventory.

        Args:
            layout: Seat layout; defaults to the standard 250-seat layout
            random_attempts: Random draws before the linear-scan fallback
            rng: Random source, injectable for reproducible allocation
        """
        if random_attempts < 0:
            raise ValueError("random_attempts must be >= 0")

        self.layout = layout or SeatLayout.get_default_layout()
        self.random_attempts = random_attempts
        self._rng = rng or random.Random()
        self._bitmaps: Dict[FlightType, bytearray] = {
            flight_type: bytearray(self.layout.total_seats + 1) for flight_type in FlightType
        }

    def allocate(self, flight_type: FlightType, ticket_class: TicketClass) -> int:
        """
        Pick and occupy a free seat in the class range.

        Random draws give an even spread of assignments; if every draw hits
        an occupied seat the range is scanned from its start, so allocation
        succeeds whenever any seat in the range is free.

        Args:
            flight_type: Flight whose table is used
            ticket_class: Class whose sub-range is searched

        Returns:
            int: The seat number now marked occupied

        Raises:
            NoSeatAvailableError: If every seat in the range is occupied
        """
        bitmap = self._bitmaps[flight_type]
        start, end = self.layout.seat_range(ticket_class)

        if not any(bitmap[seat] == 0 for seat in range(start, end + 1)):
            logger.info(f"No {ticket_class.value} seats left on {flight_type.value} flight")
            raise NoSeatAvailableError()

        for _ in range(self.random_attempts):
            seat = self._rng.randint(start, end)
            if bitmap[seat] == 0:
                bitmap[seat] = 1
                logger.debug(f"Allocated seat {seat} ({flight_type.value}) by random draw")
                return seat

        for seat in range(start, end + 1):
            if bitmap[seat] == 0:
                bitmap[seat] = 1
                logger.debug(f"Allocated seat {seat} ({flight_type.value}) by linear scan")
                return seat

        # Unreachable: the range was checked for a free seat above.
        raise NoSeatAvailableError()

    def claim(self, flight_type: FlightType, seat_number: int) -> None:
        """
        Occupy one explicit seat.

        Raises:
            ValueError: If the seat number is outside the aircraft
            SeatUnavailableError: If the seat is already occupied
        """
        if not self.layout.is_valid_seat(seat_number):
            raise ValueError(f"Seat {seat_number} is outside 1..{self.layout.total_seats}")
        bitmap = self._bitmaps[flight_type]
        if bitmap[seat_number]:
            raise SeatUnavailableError(f"Seat {seat_number} is not available")
        bitmap[seat_number] = 1

    def release(self, flight_type: FlightType, seat_number: int) -> None:
        """Free a seat. Out-of-range numbers and already-free seats are ignored."""
        if not self.layout.is_valid_seat(seat_number):
            return
        self._bitmaps[flight_type][seat_number] = 0

    def is_occupied(self, flight_type: FlightType, seat_number: int) -> bool:
        if not self.layout.is_valid_seat(seat_number):
            return False
        return self._bitmaps[flight_type][seat_number] == 1

    def list_available(self, flight_type: FlightType, ticket_class: TicketClass) -> List[int]:
        """Free seats of a class, ascending."""
        bitmap = self._bitmaps[flight_type]
        start, end = self.layout.seat_range(ticket_class)
        return [seat for seat in range(start, end + 1) if bitmap[seat] == 0]

    def occupied_seats(self, flight_type: FlightType) -> List[int]:
        bitmap = self._bitmaps[flight_type]
        return [seat for seat in range(1, self.layout.total_seats + 1) if bitmap[seat]]

    def get_statistics(self, flight_type: FlightType) -> Dict[str, int]:
        """
        Get seat availability statistics for a flight.

        Args:
            flight_type: Flight identifier

        Returns:
            Dict[str, int]: Totals plus available/occupied counts per class
        """
        bitmap = self._bitmaps[flight_type]
        occupied_count = sum(bitmap)
        stats = {
            "total_seats": self.layout.total_seats,
            "occupied_seats": occupied_count,
            "available_seats": self.layout.total_seats - occupied_count,
        }
        for ticket_class, seat_range in self.layout.class_ranges.items():
            class_occupied = sum(bitmap[seat_range.start:seat_range.end + 1])
            stats[f"{ticket_class.value}_occupied"] = class_occupied
            stats[f"{ticket_class.value}_available"] = seat_range.size - class_occupied
        return stats
