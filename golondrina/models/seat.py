"""
Seat range models for the ticket office application.

Both aircraft share one numbering scheme: seats 1..250, split into a first
class block and an economy block. A seat belongs to exactly one class.
"""

from typing import Dict, List
from pydantic import BaseModel, Field, ConfigDict, model_validator

from .enums import TicketClass

SEAT_CAPACITY = 250


class SeatRangeModel(BaseModel):
    """Inclusive seat-number range owned by a ticket class."""
    model_config = ConfigDict(frozen=True)

    ticket_class: TicketClass
    label: str = Field(..., description="Human readable class name")
    start: int = Field(..., ge=1, le=SEAT_CAPACITY)
    end: int = Field(..., ge=1, le=SEAT_CAPACITY)

    @model_validator(mode="after")
    def check_bounds(self) -> "SeatRangeModel":
        if self.start > self.end:
            raise ValueError("Seat range start must not exceed its end")
        return self

    def contains(self, seat_number: int) -> bool:
        return self.start <= seat_number <= self.end

    def seats(self) -> List[int]:
        return list(range(self.start, self.end + 1))

    @property
    def size(self) -> int:
        return self.end - self.start + 1


CLASS_SEAT_RANGES: Dict[TicketClass, SeatRangeModel] = {
    TicketClass.FIRST: SeatRangeModel(
        ticket_class=TicketClass.FIRST, label="First Class", start=1, end=20
    ),
    TicketClass.ECONOMY: SeatRangeModel(
        ticket_class=TicketClass.ECONOMY, label="Economy Class", start=21, end=SEAT_CAPACITY
    ),
}


def get_seat_range(ticket_class: TicketClass) -> SeatRangeModel:
    """Return the seat range reserved for ``ticket_class``."""
    return CLASS_SEAT_RANGES[ticket_class]
