"""
Shared fixtures for the ticket office tests.
"""

import random
from datetime import date, time

import pytest

from golondrina.models import BookingRequestModel, FlightType, TicketClass, Gender
from golondrina.services import PassengerRegistry, SeatInventory


@pytest.fixture
def make_request():
    """Factory for valid booking requests; keyword overrides replace defaults."""
    def _make(**overrides) -> BookingRequestModel:
        data = {
            "flight_type": FlightType.NATIONAL,
            "document": "CC1001",
            "first_name": "Ana",
            "last_name": "Pérez",
            "phone": "3001234567",
            "birth_date": date(1990, 5, 10),
            "gender": Gender.FEMALE,
            "ticket_class": TicketClass.FIRST,
            "flight_date": date(2030, 1, 1),
            "departure_time": time(23, 30),
        }
        data.update(overrides)
        return BookingRequestModel(**data)
    return _make


@pytest.fixture
def registry():
    """Registry with a seeded random source."""
    return PassengerRegistry(inventory=SeatInventory(rng=random.Random(1234)))
