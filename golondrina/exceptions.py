"""
Exception hierarchy for the ticket office.

The seat inventory and the temporal parsers raise these; the passenger
registry converts them into failed ``OperationResult`` values so callers
never have to catch them at the registry boundary.
"""

from typing import Optional

from .models.enums import ErrorCode


class TicketOfficeError(Exception):
    """Base exception carrying a stable error code."""

    code: Optional[ErrorCode] = None
    default_message = "Ticket office error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class DuplicateDocumentError(TicketOfficeError):
    """A passenger with the same document is already registered."""
    code = ErrorCode.DUPLICATE_DOCUMENT
    default_message = "A passenger with that document already exists"


class PassengerNotFoundError(TicketOfficeError):
    """No passenger is registered under the given document."""
    code = ErrorCode.NOT_FOUND
    default_message = "No passenger found with that document"


class NoSeatAvailableError(TicketOfficeError):
    """The requested flight type / ticket class partition is full."""
    code = ErrorCode.NO_SEAT_AVAILABLE
    default_message = "No seats available in the selected class for this flight"


class SeatOutOfClassRangeError(TicketOfficeError):
    """An explicit seat falls outside the passenger's class range."""
    code = ErrorCode.SEAT_OUT_OF_CLASS_RANGE
    default_message = "The selected seat does not belong to the passenger's class"


class SeatUnavailableError(TicketOfficeError):
    """An explicit seat is already occupied."""
    code = ErrorCode.SEAT_UNAVAILABLE
    default_message = "The selected seat is not available"


class InvalidDateError(TicketOfficeError):
    code = ErrorCode.INVALID_DATE
    default_message = "Invalid date"


class InvalidTimeError(TicketOfficeError):
    code = ErrorCode.INVALID_TIME
    default_message = "Invalid time"


class InvalidTemporalOrderingError(TicketOfficeError):
    """A date/time fails its past or present-or-future constraint."""
    code = ErrorCode.INVALID_TEMPORAL_ORDERING
    default_message = "Date and time are out of the allowed range"
