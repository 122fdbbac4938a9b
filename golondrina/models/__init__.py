"""
Ticket office Pydantic models package.

This package contains the enums, route and seat-range tables and the
Pydantic v2 models shared by the registry and the console layer.
"""

# Enums
from .enums import (
    FlightType,
    TicketClass,
    Gender,
    ErrorCode,
)

# Routes and seat ranges
from .flight import (
    FlightRouteModel,
    FLIGHT_ROUTES,
    get_route,
)

from .seat import (
    SEAT_CAPACITY,
    SeatRangeModel,
    CLASS_SEAT_RANGES,
    get_seat_range,
)

# Passenger models
from .passenger import (
    PassengerDetailsModel,
    BookingRequestModel,
    PassengerModel,
    BoardingPassModel,
)

from .result import OperationResult

__all__ = [
    # Enums
    "FlightType",
    "TicketClass",
    "Gender",
    "ErrorCode",

    # Routes and seats
    "FlightRouteModel",
    "FLIGHT_ROUTES",
    "get_route",
    "SEAT_CAPACITY",
    "SeatRangeModel",
    "CLASS_SEAT_RANGES",
    "get_seat_range",

    # Passenger models
    "PassengerDetailsModel",
    "BookingRequestModel",
    "PassengerModel",
    "BoardingPassModel",
    "OperationResult",
]
