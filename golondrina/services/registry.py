"""
Passenger registry: the public reservation contract of the ticket office.

The registry owns every live passenger record together with the seat
inventory. Records are kept in an insertion-ordered dict keyed by travel
document. Every operation returns an ``OperationResult``; inventory and
lookup errors are converted at this boundary and never propagate.
"""

import logging
import random
import threading
from typing import Dict, List, Optional

from pydantic import ValidationError

from ..exceptions import (
    TicketOfficeError,
    DuplicateDocumentError,
    PassengerNotFoundError,
    SeatOutOfClassRangeError,
    SeatUnavailableError,
)
from ..models.enums import FlightType
from ..models.flight import get_route
from ..models.passenger import (
    BookingRequestModel,
    PassengerDetailsModel,
    PassengerModel,
    BoardingPassModel,
)
from ..models.result import OperationResult
from ..utils.config import TicketOfficeConfig
from ..utils.temporal import compute_arrival
from .seat_inventory import SeatInventory

logger = logging.getLogger(__name__)

DEFAULT_AIRLINE_NAME = "GOLONDRINA VELOZ"


class PassengerRegistry:
    """
    Passenger record store backed by a seat inventory.

    Features:
    - Document-keyed lookup preserving booking order
    - All-or-nothing booking, cancellation and seat change
    - Boarding pass data derived from the stored record
    - A single re-entrant lock around every mutation, so seat state and
      record state always change together
    """

    def __init__(
        self,
        inventory: Optional[SeatInventory] = None,
        airline_name: str = DEFAULT_AIRLINE_NAME,
    ):
        """
        Initialize an empty registry.

        Args:
            inventory: Seat inventory to own; a fresh one is created if omitted
            airline_name: Airline name printed on boarding passes
        """
        self.inventory = inventory or SeatInventory()
        self.airline_name = airline_name
        self._passengers: Dict[str, PassengerModel] = {}
        self._lock = threading.RLock()

    @classmethod
    def from_config(cls, config: TicketOfficeConfig) -> "PassengerRegistry":
        """Build a registry whose seat draws follow the configured policy."""
        inventory = SeatInventory(
            random_attempts=config.seat_random_attempts,
            rng=random.Random(config.random_seed),
        )
        return cls(inventory=inventory, airline_name=config.airline_name)

    def __len__(self) -> int:
        return len(self._passengers)

    def __contains__(self, document: str) -> bool:
        return document in self._passengers

    def _get(self, document: str) -> PassengerModel:
        passenger = self._passengers.get(document)
        if passenger is None:
            raise PassengerNotFoundError()
        return passenger

    def book(self, request: BookingRequestModel) -> OperationResult:
        """
        Book a ticket and assign a seat.

        Args:
            request: Validated booking data (everything except the seat)

        Returns:
            OperationResult: The new passenger, or DUPLICATE_DOCUMENT /
            NO_SEAT_AVAILABLE / INVALID_TEMPORAL_ORDERING with no record
            created
        """
        with self._lock:
            try:
                if request.document in self._passengers:
                    raise DuplicateDocumentError()

                route = get_route(request.flight_type)
                arrival_date, arrival_time = compute_arrival(
                    request.flight_type, request.flight_date, request.departure_time
                )
                seat = self.inventory.allocate(request.flight_type, request.ticket_class)

                try:
                    passenger = PassengerModel(
                        flight_type=request.flight_type,
                        flight_code=route.flight_code,
                        document=request.document,
                        first_name=request.first_name,
                        last_name=request.last_name,
                        phone=request.phone,
                        birth_date=request.birth_date,
                        gender=request.gender,
                        ticket_class=request.ticket_class,
                        flight_date=request.flight_date,
                        departure_time=request.departure_time,
                        arrival_date=arrival_date,
                        arrival_time=arrival_time,
                        seat_number=seat,
                    )
                except ValidationError:
                    # Hand the seat back so no seat is held without a record.
                    self.inventory.release(request.flight_type, seat)
                    raise
                self._passengers[passenger.document] = passenger
            except TicketOfficeError as e:
                logger.warning(f"Booking for document {request.document} failed: {e.message}")
                return OperationResult.from_error(e)

        logger.info(f"Booked {passenger.document} on {passenger.flight_code}, seat {seat}")
        return OperationResult.succeeded(
            message=f"Ticket purchased successfully. Assigned seat: {seat}",
            passenger=passenger,
        )

    def find_by_document(self, document: str) -> OperationResult:
        try:
            passenger = self._get(document)
        except PassengerNotFoundError as e:
            return OperationResult.from_error(e)
        return OperationResult.succeeded(passenger=passenger)

    def modify(self, document: str, details: PassengerDetailsModel) -> OperationResult:
        """
        Replace the editable personal details of a passenger.

        Document, flight, schedule, class and seat are left untouched.
        """
        with self._lock:
            try:
                current = self._get(document)
            except PassengerNotFoundError as e:
                logger.warning(f"Modify for unknown document {document}")
                return OperationResult.from_error(e)

            # Reassigning an existing key keeps the record's position.
            updated = current.model_copy(update=details.model_dump())
            self._passengers[document] = updated

        logger.info(f"Modified passenger {document}")
        return OperationResult.succeeded(message="Passenger updated successfully", passenger=updated)

    def cancel(self, document: str) -> OperationResult:
        """Remove a passenger and release their seat as one step."""
        with self._lock:
            try:
                passenger = self._get(document)
            except PassengerNotFoundError as e:
                logger.warning(f"Cancel for unknown document {document}")
                return OperationResult.from_error(e)

            del self._passengers[document]
            self.inventory.release(passenger.flight_type, passenger.seat_number)

        logger.info(f"Cancelled {document}, released seat {passenger.seat_number} on {passenger.flight_code}")
        return OperationResult.succeeded(message="Ticket cancelled successfully", passenger=passenger)

    def change_seat(self, document: str, requested_seat: int) -> OperationResult:
        """
        Move a passenger to an explicit seat within their own class.

        Args:
            document: Passenger document
            requested_seat: Seat number wanted

        Returns:
            OperationResult: Updated passenger with ``previous_seat`` set, or
            NOT_FOUND / SEAT_OUT_OF_CLASS_RANGE / SEAT_UNAVAILABLE with both
            seats left exactly as they were
        """
        with self._lock:
            try:
                passenger = self._get(document)
                if not self.inventory.layout.contains(passenger.ticket_class, requested_seat):
                    raise SeatOutOfClassRangeError()
                if self.inventory.is_occupied(passenger.flight_type, requested_seat):
                    raise SeatUnavailableError()
            except TicketOfficeError as e:
                logger.warning(f"Seat change for {document} to {requested_seat} failed: {e.message}")
                return OperationResult.from_error(e)

            previous_seat = passenger.seat_number
            self.inventory.release(passenger.flight_type, previous_seat)
            self.inventory.claim(passenger.flight_type, requested_seat)
            passenger.seat_number = requested_seat

        logger.info(f"Moved {document} from seat {previous_seat} to {requested_seat}")
        return OperationResult.succeeded(
            message="Seat updated successfully",
            passenger=passenger,
            previous_seat=previous_seat,
        )

    def list(self) -> List[PassengerModel]:
        """Snapshot of all passengers in booking order."""
        return [passenger.model_copy(deep=True) for passenger in self._passengers.values()]

    def available_seats(self, document: str) -> Optional[List[int]]:
        """Free seats in the passenger's own class, or None if unknown."""
        passenger = self._passengers.get(document)
        if passenger is None:
            return None
        return self.inventory.list_available(passenger.flight_type, passenger.ticket_class)

    def boarding_pass(self, document: str) -> OperationResult:
        """Build boarding pass data for a passenger."""
        try:
            passenger = self._get(document)
        except PassengerNotFoundError as e:
            return OperationResult.from_error(e)

        route = get_route(passenger.flight_type)
        seat_range = self.inventory.layout.class_ranges[passenger.ticket_class]
        boarding_pass = BoardingPassModel(
            airline_name=self.airline_name,
            flight_type_label=route.label,
            flight_code=passenger.flight_code,
            route=route.description,
            document=passenger.document,
            first_name=passenger.first_name,
            last_name=passenger.last_name,
            ticket_class_label=seat_range.label,
            flight_date=passenger.flight_date,
            departure_time=passenger.departure_time,
            arrival_date=passenger.arrival_date,
            arrival_time=passenger.arrival_time,
            seat_number=passenger.seat_number,
        )
        return OperationResult.succeeded(passenger=passenger, boarding_pass=boarding_pass)

    def seat_statistics(self, flight_type: FlightType) -> Dict[str, int]:
        stats = self.inventory.get_statistics(flight_type)
        stats["passengers"] = sum(
            1 for passenger in self._passengers.values() if passenger.flight_type == flight_type
        )
        return stats
