"""
Rich renderables for passengers, seat maps and boarding passes.

Nothing here mutates registry state; every function takes model snapshots
and returns something a ``rich.console.Console`` can print.
"""

from typing import List

from rich import box
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..models.flight import get_route
from ..models.passenger import PassengerModel, BoardingPassModel
from ..models.seat import get_seat_range
from ..utils.temporal import format_date, format_time

SEATS_PER_LINE = 15


def passenger_details_table(passenger: PassengerModel, include_flight_details: bool = False) -> Table:
    """Two-column table with a passenger's details."""
    table = Table(show_header=False, box=box.SIMPLE)
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("Document", passenger.document)
    table.add_row("First name", passenger.first_name)
    table.add_row("Last name", passenger.last_name)
    table.add_row("Phone", passenger.phone)
    table.add_row("Birth date", format_date(passenger.birth_date))
    table.add_row("Gender", passenger.gender.value)
    table.add_row("Ticket class", get_seat_range(passenger.ticket_class).label)
    table.add_row("Seat", str(passenger.seat_number))

    if include_flight_details:
        route = get_route(passenger.flight_type)
        table.add_row("Flight type", f"{route.label} ({route.description})")
        table.add_row("Flight code", passenger.flight_code)
        table.add_row("Flight date", format_date(passenger.flight_date))
        table.add_row("Departure time", format_time(passenger.departure_time))
        table.add_row("Arrival date", format_date(passenger.arrival_date))
        table.add_row("Arrival time", format_time(passenger.arrival_time))

    return table


def passengers_table(passengers: List[PassengerModel]) -> Table:
    """One row per passenger in booking order."""
    table = Table(title="Registered passengers", box=box.ROUNDED)
    table.add_column("Document", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Phone")
    table.add_column("Birth date")
    table.add_column("Gender", justify="center")
    table.add_column("Class")
    table.add_column("Flight", no_wrap=True)
    table.add_column("Seat", justify="right", style="green")

    for passenger in passengers:
        table.add_row(
            passenger.document,
            passenger.full_name,
            passenger.phone,
            format_date(passenger.birth_date),
            passenger.gender.value,
            get_seat_range(passenger.ticket_class).label,
            passenger.flight_code,
            str(passenger.seat_number),
        )
    return table


def available_seats_text(seats: List[int]) -> Text:
    """Seat numbers, fifteen per line; '(none)' when the list is empty."""
    if not seats:
        return Text("Available seats: (none)")

    lines = []
    for i in range(0, len(seats), SEATS_PER_LINE):
        lines.append(" ".join(str(seat) for seat in seats[i:i + SEATS_PER_LINE]))
    return Text("Available seats: " + "\n".join(lines))


def boarding_pass_panel(boarding_pass: BoardingPassModel) -> Panel:
    """Printable boarding pass."""
    table = Table(show_header=False, box=None)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Flight type", boarding_pass.flight_type_label)
    table.add_row("Flight code", boarding_pass.flight_code)
    table.add_row("Route", boarding_pass.route)
    table.add_row("Passenger document", boarding_pass.document)
    table.add_row("Passenger first name", boarding_pass.first_name)
    table.add_row("Passenger last name", boarding_pass.last_name)
    table.add_row("Ticket class", boarding_pass.ticket_class_label)
    table.add_row("Flight date", format_date(boarding_pass.flight_date))
    table.add_row("Departure time", format_time(boarding_pass.departure_time))
    table.add_row("Arrival date", format_date(boarding_pass.arrival_date))
    table.add_row("Arrival time", format_time(boarding_pass.arrival_time))
    table.add_row("Seat", str(boarding_pass.seat_number))

    return Panel(
        table,
        title=f"[bold cyan]{boarding_pass.airline_name}[/bold cyan]",
        subtitle="BOARDING PASS",
        box=box.DOUBLE,
    )
