"""
Tests for the interactive console layer.

The menu is driven through an injected input stream and a Rich console
writing to a string buffer, so no terminal is needed.
"""

import io
import random
from datetime import datetime

import pytest
from rich.console import Console
from typer.testing import CliRunner

from golondrina.cli.app import app
from golondrina.cli.menu import TicketOfficeMenu
from golondrina.cli.presentation import available_seats_text
from golondrina.cli.prompts import ConsolePrompter
from golondrina.models import FlightType, TicketClass, Gender
from golondrina.services import PassengerRegistry, SeatInventory

FIXED_NOW = datetime(2024, 1, 1, 8, 0)


def run_session(registry: PassengerRegistry, lines):
    """Run the menu over the given input lines; return (exit code, output)."""
    output = io.StringIO()
    console = Console(file=output, width=140, color_system=None)
    prompter = ConsolePrompter(console, stream=io.StringIO("\n".join(lines) + "\n"), clock=lambda: FIXED_NOW)
    code = TicketOfficeMenu(registry, console, prompter).run()
    return code, output.getvalue()


@pytest.fixture
def menu_registry():
    return PassengerRegistry(inventory=SeatInventory(rng=random.Random(5)))


BOOKING_LINES = [
    "1",             # buy ticket
    "1",             # national
    "DOC1",
    "Ana",
    "Pérez",
    "3001234567",
    "10/05/1990",
    "f",
    "1",             # first class
    "01/02/2024",
    "23:30",
]


class TestMenuSession:
    """Test menu flows."""

    def test_exit(self, menu_registry):
        code, output = run_session(menu_registry, ["8"])
        assert code == 0
        assert "Thank you for using the ticket system." in output

    def test_end_of_input_exits(self, menu_registry):
        code, output = run_session(menu_registry, [])
        assert code == 0
        assert "Thank you" in output

    def test_invalid_option(self, menu_registry):
        _, output = run_session(menu_registry, ["42", "8"])
        assert "Invalid option, please try again." in output

    def test_buy_ticket(self, menu_registry):
        code, output = run_session(menu_registry, BOOKING_LINES + ["3", "8"])

        assert code == 0
        assert "Ticket purchased successfully" in output
        passenger = menu_registry.find_by_document("DOC1").passenger
        assert passenger.flight_type == FlightType.NATIONAL
        assert passenger.ticket_class == TicketClass.FIRST
        assert passenger.gender == Gender.FEMALE
        assert 1 <= passenger.seat_number <= 20
        assert passenger.arrival_time.strftime("%H:%M") == "00:20"
        assert "DOC1" in output

    def test_buy_ticket_reprompts_invalid_input(self, menu_registry):
        lines = [
            "1",
            "9", "2",                       # bad flight type, then international
            "", "DOC2",                     # empty document, then valid
            "Luis", "Gómez", "310",
            "01/01/2030", "31/02/1990", "01/03/1990",   # future, invalid, valid
            "X", "m",
            "3", "2",                       # bad class, then economy
            "01/01/2020", "10:00",          # flight in the past
            "02/01/2024", "25:00",          # bad time
            "02/01/2024", "10:00",
            "8",
        ]
        _, output = run_session(menu_registry, lines)

        assert "Empty input, please try again." in output
        assert "Birth date must be in the past" in output
        assert "Enter only F, M or O." not in output
        assert "Invalid value." in output
        assert "Flight date and time must be present or future" in output
        assert "Invalid time" in output
        passenger = menu_registry.find_by_document("DOC2").passenger
        assert passenger.flight_type == FlightType.INTERNATIONAL
        assert passenger.ticket_class == TicketClass.ECONOMY
        assert passenger.gender == Gender.MALE

    def test_buy_ticket_reprompts_duplicate_document(self, menu_registry):
        run_session(menu_registry, BOOKING_LINES + ["8"])
        lines = list(BOOKING_LINES)
        lines.insert(3, "DOC9")
        _, output = run_session(menu_registry, lines + ["8"])

        assert "A passenger with that document already exists." in output
        assert "DOC9" in menu_registry
        assert len(menu_registry) == 2

    def test_modify_passenger(self, menu_registry):
        lines = BOOKING_LINES + [
            "2", "DOC1",
            "Ana María", "Pérez", "3000000000", "11/06/1991", "O",
            "8",
        ]
        _, output = run_session(menu_registry, lines)

        assert "Passenger updated successfully" in output
        passenger = menu_registry.find_by_document("DOC1").passenger
        assert passenger.first_name == "Ana María"
        assert passenger.gender == Gender.OTHER

    def test_search_unknown(self, menu_registry):
        _, output = run_session(menu_registry, ["4", "NOPE", "8"])
        assert "No passenger found with that document" in output

    def test_search_shows_flight_details(self, menu_registry):
        _, output = run_session(menu_registry, BOOKING_LINES + ["4", "DOC1", "8"])
        assert "GOPLA01" in output
        assert "02/02/2024" in output

    def test_change_seat(self, menu_registry, make_request):
        menu_registry.book(make_request(document="DOC5"))
        free_seat = menu_registry.available_seats("DOC5")[0]

        _, output = run_session(menu_registry, [
            "5", "DOC5", "100",            # economy seat for a first class passenger
            "5", "DOC5", "abc",            # not a number
            "5", "DOC5", str(free_seat),
            "8",
        ])

        assert "does not belong to the passenger's class" in output
        assert "Invalid seat number." in output
        assert "Seat updated successfully" in output
        assert menu_registry.find_by_document("DOC5").passenger.seat_number == free_seat

    def test_boarding_pass(self, menu_registry, make_request):
        menu_registry.book(make_request(document="DOC6", flight_type=FlightType.INTERNATIONAL))
        _, output = run_session(menu_registry, ["6", "DOC6", "8"])
        assert "BOARDING PASS" in output
        assert "GOLONDRINA VELOZ" in output
        assert "GOPLA02" in output

    def test_cancel(self, menu_registry, make_request):
        menu_registry.book(make_request(document="DOC7"))
        _, output = run_session(menu_registry, ["7", "DOC7", "7", "DOC7", "8"])
        assert "Ticket cancelled successfully" in output
        assert "No passenger found with that document" in output
        assert len(menu_registry) == 0

    def test_list_empty(self, menu_registry):
        _, output = run_session(menu_registry, ["3", "8"])
        assert "No passengers registered." in output


class TestPresentation:
    """Test rendering helpers."""

    def _render(self, renderable) -> str:
        output = io.StringIO()
        Console(file=output, width=200, color_system=None).print(renderable)
        return output.getvalue()

    def test_available_seats_wraps_every_fifteen(self):
        rendered = self._render(available_seats_text(list(range(21, 51))))
        lines = [line for line in rendered.splitlines() if line.strip()]
        assert len(lines) == 2
        assert lines[0].rstrip().endswith("35")

    def test_no_available_seats(self):
        assert "(none)" in self._render(available_seats_text([]))


class TestCommandLine:
    """Test the typer entry point."""

    def test_exit_immediately(self):
        runner = CliRunner()
        result = runner.invoke(app, ["--seed", "7"], input="8\n")
        assert result.exit_code == 0
        assert "Thank you" in result.output

    def test_invalid_log_level(self):
        runner = CliRunner()
        result = runner.invoke(app, ["--log-level", "LOUD"], input="8\n")
        assert result.exit_code == 1
