"""
Operation result model returned by every registry command and query.

Failures are reported as data rather than raised, so the console layer can
show the message and let the operator retry.
"""

from typing import Optional, TYPE_CHECKING
from pydantic import BaseModel, Field, ConfigDict

from .enums import ErrorCode
from .passenger import PassengerModel, BoardingPassModel

if TYPE_CHECKING:
    from ..exceptions import TicketOfficeError


class OperationResult(BaseModel):
    """
    Outcome of a registry operation.

    ``passenger`` is a snapshot copy; mutating it does not affect the
    registry.
    """
    model_config = ConfigDict(frozen=True)

    success: bool = Field(..., description="Whether the operation completed")
    error: Optional[ErrorCode] = Field(None, description="Failure code when success is False")
    message: str = Field(default="", description="Operator-facing message")
    passenger: Optional[PassengerModel] = None
    previous_seat: Optional[int] = Field(None, description="Seat held before a seat change")
    boarding_pass: Optional[BoardingPassModel] = None

    @property
    def ok(self) -> bool:
        return self.success

    @classmethod
    def succeeded(
        cls,
        message: str = "",
        passenger: Optional[PassengerModel] = None,
        **extra,
    ) -> "OperationResult":
        snapshot = passenger.model_copy(deep=True) if passenger is not None else None
        return cls(success=True, message=message, passenger=snapshot, **extra)

    @classmethod
    def failed(cls, error: ErrorCode, message: str) -> "OperationResult":
        return cls(success=False, error=error, message=message)

    @classmethod
    def from_error(cls, exc: "TicketOfficeError") -> "OperationResult":
        return cls.failed(exc.code, exc.message)
