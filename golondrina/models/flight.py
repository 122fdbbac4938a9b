"""
Flight route models for the ticket office application.

The office sells exactly two routes, one per flight type. Each route fixes
the flight code printed on tickets, the flight duration and the timezone
shift applied when deriving the arrival schedule.
"""

from typing import Dict
from pydantic import BaseModel, Field, ConfigDict

from .enums import FlightType


class FlightRouteModel(BaseModel):
    """
    Static route information for a flight type.

    Arrival is derived by shifting the departure instant by
    ``duration_minutes + timezone_offset_minutes`` in a single step.
    """
    model_config = ConfigDict(frozen=True)

    flight_type: FlightType
    label: str = Field(..., max_length=2, description="Menu/ticket label ('01', '02')")
    flight_code: str = Field(..., max_length=7, description="Flight code printed on tickets")
    origin: str = Field(..., description="Departure city")
    destination: str = Field(..., description="Arrival city")
    duration_minutes: int = Field(..., ge=0, description="Flight duration in minutes")
    timezone_offset_minutes: int = Field(default=0, description="Local clock shift at destination")

    @property
    def arrival_shift_minutes(self) -> int:
        """Total minutes added to the departure instant."""
        return self.duration_minutes + self.timezone_offset_minutes

    @property
    def description(self) -> str:
        return f"{self.origin}-{self.destination}"


FLIGHT_ROUTES: Dict[FlightType, FlightRouteModel] = {
    FlightType.NATIONAL: FlightRouteModel(
        flight_type=FlightType.NATIONAL,
        label="01",
        flight_code="GOPLA01",
        origin="Pereira",
        destination="Bogotá",
        duration_minutes=50,
    ),
    FlightType.INTERNATIONAL: FlightRouteModel(
        flight_type=FlightType.INTERNATIONAL,
        label="02",
        flight_code="GOPLA02",
        origin="Bogotá",
        destination="Madrid",
        duration_minutes=11 * 60,
        timezone_offset_minutes=7 * 60,
    ),
}


def get_route(flight_type: FlightType) -> FlightRouteModel:
    """Return the route served by ``flight_type``."""
    return FLIGHT_ROUTES[flight_type]
