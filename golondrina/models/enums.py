"""
Enums for the ticket office application.

This module contains all enumeration types used throughout the application
for consistent data validation and type safety.
"""

from enum import Enum


class FlightType(str, Enum):
    """Flight type; each type maps to exactly one hard-coded route."""
    NATIONAL = "national"
    INTERNATIONAL = "international"


class TicketClass(str, Enum):
    """Ticket class categories. Each class owns a fixed seat sub-range."""
    FIRST = "first"
    ECONOMY = "economy"


class Gender(str, Enum):
    """Passenger gender as recorded on the ticket."""
    FEMALE = "F"
    MALE = "M"
    OTHER = "O"


class ErrorCode(str, Enum):
    """Failure codes reported by registry operations."""
    DUPLICATE_DOCUMENT = "duplicate_document"
    NOT_FOUND = "not_found"
    NO_SEAT_AVAILABLE = "no_seat_available"
    SEAT_OUT_OF_CLASS_RANGE = "seat_out_of_class_range"
    SEAT_UNAVAILABLE = "seat_unavailable"
    INVALID_DATE = "invalid_date"
    INVALID_TIME = "invalid_time"
    INVALID_TEMPORAL_ORDERING = "invalid_temporal_ordering"
