"""
Menu loop dispatching operator choices to the passenger registry.
"""

import logging
from typing import Callable, Dict

from rich import box
from rich.console import Console
from rich.panel import Panel

from ..models.passenger import (
    BookingRequestModel,
    PassengerDetailsModel,
    MAX_DOCUMENT_LENGTH,
    MAX_NAME_LENGTH,
    MAX_PHONE_LENGTH,
)
from ..models.result import OperationResult
from ..services.registry import PassengerRegistry
from .presentation import (
    passenger_details_table,
    passengers_table,
    available_seats_text,
    boarding_pass_panel,
)
from .prompts import ConsolePrompter

logger = logging.getLogger(__name__)

EXIT_OPTION = "8"

MENU_ENTRIES = (
    ("1", "Buy ticket"),
    ("2", "Modify passenger"),
    ("3", "List passengers"),
    ("4", "Search passenger"),
    ("5", "Change seat"),
    ("6", "Print boarding pass"),
    ("7", "Cancel ticket"),
    (EXIT_OPTION, "Exit"),
)


class TicketOfficeMenu:
    """Interactive ticket office session over one registry."""

    def __init__(self, registry: PassengerRegistry, console: Console, prompter: ConsolePrompter):
        self.registry = registry
        self.console = console
        self.prompter = prompter
        self.handlers: Dict[str, Callable[[], None]] = {
            "1": self.buy_ticket,
            "2": self.modify_passenger,
            "3": self.list_passengers,
            "4": self.search_passenger,
            "5": self.change_seat,
            "6": self.print_boarding_pass,
            "7": self.cancel_ticket,
        }

    def print_menu(self) -> None:
        lines = "\n".join(f"{key}. {label}" for key, label in MENU_ENTRIES)
        self.console.print(
            Panel(lines, title=f"[bold cyan]{self.registry.airline_name}[/bold cyan]", subtitle="TICKETS", box=box.DOUBLE)
        )

    def run(self) -> int:
        """Run until the operator exits or input ends."""
        while True:
            self.print_menu()
            try:
                option = self.prompter.ask_menu_option()
                if option == EXIT_OPTION:
                    break
                handler = self.handlers.get(option)
                if handler is None:
                    self.console.print("[red]Invalid option, please try again.[/red]")
                else:
                    handler()
            except (EOFError, KeyboardInterrupt):
                logger.info("Input closed, leaving the ticket office")
                break
            self.console.print()

        self.console.print("Thank you for using the ticket system.")
        return 0

    def _report(self, result: OperationResult) -> None:
        style = "green" if result.ok else "red"
        self.console.print(f"[{style}]{result.message}[/{style}]")

    def _ask_document(self, prompt: str = "Passenger document") -> str:
        return self.prompter.ask_text(prompt, MAX_DOCUMENT_LENGTH)

    def _ask_details(self) -> PassengerDetailsModel:
        return PassengerDetailsModel(
            first_name=self.prompter.ask_text("First name", MAX_NAME_LENGTH),
            last_name=self.prompter.ask_text("Last name", MAX_NAME_LENGTH),
            phone=self.prompter.ask_text("Phone", MAX_PHONE_LENGTH),
            birth_date=self.prompter.ask_birth_date(),
            gender=self.prompter.ask_gender(),
        )

    def buy_ticket(self) -> None:
        flight_type = self.prompter.ask_flight_type()

        while True:
            document = self._ask_document()
            if document not in self.registry:
                break
            self.console.print("[red]A passenger with that document already exists.[/red]")

        details = self._ask_details()
        ticket_class = self.prompter.ask_ticket_class()
        flight_date, departure_time = self.prompter.ask_flight_schedule()

        request = BookingRequestModel(
            **details.model_dump(),
            flight_type=flight_type,
            document=document,
            ticket_class=ticket_class,
            flight_date=flight_date,
            departure_time=departure_time,
        )
        self._report(self.registry.book(request))

    def modify_passenger(self) -> None:
        document = self._ask_document("Document of the passenger to modify")
        found = self.registry.find_by_document(document)
        if not found.ok:
            self._report(found)
            return

        self.console.print(f"Modifying passenger {found.passenger.full_name}")
        self._report(self.registry.modify(document, self._ask_details()))

    def list_passengers(self) -> None:
        passengers = self.registry.list()
        if not passengers:
            self.console.print("No passengers registered.")
            return
        self.console.print(passengers_table(passengers))

    def search_passenger(self) -> None:
        document = self._ask_document("Document of the passenger to search")
        found = self.registry.find_by_document(document)
        if not found.ok:
            self._report(found)
            return
        self.console.print(passenger_details_table(found.passenger, include_flight_details=True))

    def change_seat(self) -> None:
        document = self._ask_document()
        found = self.registry.find_by_document(document)
        if not found.ok:
            self._report(found)
            return

        self.console.print(f"Current seat: {found.passenger.seat_number}")
        self.console.print(available_seats_text(self.registry.available_seats(document) or []))
        seat = self.prompter.ask_seat_number()
        if seat is None:
            return
        self._report(self.registry.change_seat(document, seat))

    def print_boarding_pass(self) -> None:
        result = self.registry.boarding_pass(self._ask_document())
        if not result.ok:
            self._report(result)
            return
        self.console.print(boarding_pass_panel(result.boarding_pass))

    def cancel_ticket(self) -> None:
        self._report(self.registry.cancel(self._ask_document("Document of the passenger to cancel")))
