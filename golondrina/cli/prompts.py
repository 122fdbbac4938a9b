"""
Operator input collection with validation and re-prompting.

Every ``ask_*`` method keeps asking until the raw input is valid, so the
registry only ever receives parsed, range-checked values.
"""

from datetime import date, datetime, time
from typing import Callable, Optional, TextIO, Tuple

from rich.console import Console
from rich.prompt import Prompt

from ..exceptions import TicketOfficeError
from ..models.enums import FlightType, TicketClass, Gender
from ..models.flight import FLIGHT_ROUTES
from ..models.seat import CLASS_SEAT_RANGES
from ..utils.temporal import (
    parse_date,
    parse_time,
    ensure_birth_date_in_past,
    ensure_flight_in_future,
)

FLIGHT_TYPE_CHOICES = {
    "01": FlightType.NATIONAL,
    "1": FlightType.NATIONAL,
    "02": FlightType.INTERNATIONAL,
    "2": FlightType.INTERNATIONAL,
}

TICKET_CLASS_CHOICES = {
    "1": TicketClass.FIRST,
    "2": TicketClass.ECONOMY,
}


class OperatorPrompt(Prompt):
    """Prompt that reports end of an injected input stream as EOFError."""

    @classmethod
    def get_input(cls, console, prompt, password, stream=None):
        value = super().get_input(console, prompt, password, stream=stream)
        if stream is not None and value == "":
            raise EOFError("input stream exhausted")
        return value


class ConsolePrompter:
    """
    Prompt helper bound to a Rich console.

    Args:
        console: Console used for prompts and error messages
        stream: Optional input stream; stdin is used when omitted
        clock: Callable returning "now" for past/future checks
    """

    def __init__(
        self,
        console: Console,
        stream: Optional[TextIO] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.console = console
        self.stream = stream
        self.clock = clock or datetime.now

    def _ask(self, prompt: str) -> str:
        return OperatorPrompt.ask(prompt, console=self.console, stream=self.stream).strip()

    def _error(self, message: str) -> None:
        self.console.print(f"[red]{message}[/red]")

    def ask_text(self, prompt: str, max_length: Optional[int] = None) -> str:
        """Non-empty free text, truncated to ``max_length``."""
        while True:
            value = self._ask(prompt)
            if not value:
                self._error("Empty input, please try again.")
                continue
            return value[:max_length] if max_length else value

    def ask_menu_option(self) -> str:
        return self.ask_text("Select an option")

    def ask_flight_type(self) -> FlightType:
        while True:
            self.console.print("Select the flight type:")
            for flight_type, route in FLIGHT_ROUTES.items():
                kind = "National" if flight_type == FlightType.NATIONAL else "International"
                self.console.print(f"{route.label}. {kind} ({route.description})")
            choice = self.ask_text("Option")
            if choice in FLIGHT_TYPE_CHOICES:
                return FLIGHT_TYPE_CHOICES[choice]
            self._error("Invalid option. Please try again.")

    def ask_ticket_class(self) -> TicketClass:
        while True:
            self.console.print("Select the ticket class:")
            for key, ticket_class in TICKET_CLASS_CHOICES.items():
                seat_range = CLASS_SEAT_RANGES[ticket_class]
                self.console.print(f"{key}. {seat_range.label} (seats {seat_range.start}-{seat_range.end})")
            choice = self.ask_text("Option")
            if choice in TICKET_CLASS_CHOICES:
                return TICKET_CLASS_CHOICES[choice]
            self._error("Invalid option. Please try again.")

    def ask_gender(self) -> Gender:
        while True:
            value = self.ask_text("Gender (F/M/O)")
            if len(value) != 1:
                self._error("Enter only F, M or O.")
                continue
            try:
                return Gender(value.upper())
            except ValueError:
                self._error("Invalid value.")

    def ask_birth_date(self) -> date:
        while True:
            raw = self.ask_text("Birth date (dd/mm/yyyy)")
            try:
                return ensure_birth_date_in_past(parse_date(raw), now=self.clock())
            except TicketOfficeError as e:
                self._error(e.message)

    def ask_flight_schedule(self) -> Tuple[date, time]:
        """Flight date and departure time; both are asked again on any error."""
        while True:
            try:
                flight_date = parse_date(self.ask_text("Flight date (dd/mm/yyyy)"))
                departure_time = parse_time(self.ask_text("Departure time (hh:mm, 24 hour)"))
                return ensure_flight_in_future(flight_date, departure_time, now=self.clock())
            except TicketOfficeError as e:
                self._error(e.message)

    def ask_seat_number(self) -> Optional[int]:
        """A single seat number, or None when the input is not an integer."""
        raw = self._ask("Enter the new seat")
        try:
            return int(raw)
        except ValueError:
            self._error("Invalid seat number.")
            return None
