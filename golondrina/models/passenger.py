"""
Passenger-related Pydantic models for the ticket office application.

This module contains the passenger record held by the registry, the
booking request that creates it and the editable subset used by the
modify operation.
"""

from datetime import date, time
from typing import Any
from pydantic import BaseModel, Field, ConfigDict, field_validator

from .enums import FlightType, TicketClass, Gender
from .seat import SEAT_CAPACITY

MIN_YEAR = 1900
MAX_DOCUMENT_LENGTH = 31
MAX_NAME_LENGTH = 63
MAX_PHONE_LENGTH = 31


def _normalize_gender(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().upper()
    return value


def _check_year(value: date) -> date:
    if value.year < MIN_YEAR:
        raise ValueError(f"Year must be {MIN_YEAR} or later")
    return value


class PassengerDetailsModel(BaseModel):
    """
    Personal details a ticket agent may edit after booking.

    Document, flight identity, schedule, class and seat are not part of
    this model, so the modify operation cannot touch them.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    first_name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH, description="First name")
    last_name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH, description="Last name")
    phone: str = Field(..., min_length=1, max_length=MAX_PHONE_LENGTH, description="Contact phone")
    birth_date: date = Field(..., description="Date of birth")
    gender: Gender = Field(..., description="Gender (F/M/O)")

    @field_validator("gender", mode="before")
    @classmethod
    def normalize_gender(cls, v: Any) -> Any:
        return _normalize_gender(v)

    @field_validator("birth_date")
    @classmethod
    def validate_birth_year(cls, v: date) -> date:
        return _check_year(v)


class BookingRequestModel(PassengerDetailsModel):
    """
    Everything needed to book a ticket except the seat.

    The flight code and the arrival schedule are derived by the registry.
    """
    flight_type: FlightType = Field(..., description="National or international flight")
    document: str = Field(..., min_length=1, max_length=MAX_DOCUMENT_LENGTH, description="Travel document")
    ticket_class: TicketClass = Field(..., description="Ticket class")
    flight_date: date = Field(..., description="Departure date")
    departure_time: time = Field(..., description="Departure time of day")

    @field_validator("flight_date")
    @classmethod
    def validate_flight_year(cls, v: date) -> date:
        return _check_year(v)


class PassengerModel(BaseModel):
    """
    Passenger record owned by the registry.

    Identity and schedule fields are frozen; details change through
    ``PassengerRegistry.modify`` and the seat through
    ``PassengerRegistry.change_seat``.
    """
    model_config = ConfigDict(from_attributes=True, validate_assignment=True)

    flight_type: FlightType = Field(..., frozen=True)
    flight_code: str = Field(..., frozen=True, description="Derived from the flight type")
    document: str = Field(..., frozen=True, min_length=1, max_length=MAX_DOCUMENT_LENGTH)
    first_name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    last_name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    phone: str = Field(..., min_length=1, max_length=MAX_PHONE_LENGTH)
    birth_date: date
    gender: Gender
    ticket_class: TicketClass
    flight_date: date = Field(..., frozen=True)
    departure_time: time = Field(..., frozen=True)
    arrival_date: date = Field(..., description="Derived local arrival date")
    arrival_time: time = Field(..., description="Derived local arrival time")
    seat_number: int = Field(..., ge=1, le=SEAT_CAPACITY, description="Assigned seat")

    @field_validator("gender", mode="before")
    @classmethod
    def normalize_gender(cls, v: Any) -> Any:
        return _normalize_gender(v)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class BoardingPassModel(BaseModel):
    """Data printed on a boarding pass."""
    model_config = ConfigDict(frozen=True)

    airline_name: str
    flight_type_label: str
    flight_code: str
    route: str
    document: str
    first_name: str
    last_name: str
    ticket_class_label: str
    flight_date: date
    departure_time: time
    arrival_date: date
    arrival_time: time
    seat_number: int
