"""
Calendar and clock helpers for bookings.

Dates are ``dd/mm/yyyy`` and times ``hh:mm`` (24 hour) at the console;
internally they are plain ``datetime.date`` / ``datetime.time`` values.
Comparisons against "now" use the local wall clock truncated to whole
seconds, and both bounds are inclusive: the exact current instant counts
as past-or-equal and as future-or-equal.
"""

import re
from datetime import date, datetime, time, timedelta
from typing import Optional, Tuple

from ..exceptions import InvalidDateError, InvalidTimeError, InvalidTemporalOrderingError
from ..models.enums import FlightType
from ..models.flight import get_route

MIN_YEAR = 1900
_DAYS_PER_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

_DATE_PATTERN = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")
_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{1,2})$")


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    """Number of days in ``month``; 0 when the month itself is invalid."""
    if month < 1 or month > 12:
        return 0
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_PER_MONTH[month - 1]


def validate_date(day: int, month: int, year: int) -> bool:
    if year < MIN_YEAR:
        return False
    return 1 <= day <= days_in_month(month, year)


def validate_time(hour: int, minute: int) -> bool:
    return 0 <= hour <= 23 and 0 <= minute <= 59


def _reference_now(now: Optional[datetime]) -> datetime:
    return (now or datetime.now()).replace(microsecond=0)


def _instant(on: date, at: time) -> datetime:
    return datetime.combine(on, at).replace(microsecond=0)


def is_past_or_equal(on: date, at: time, now: Optional[datetime] = None) -> bool:
    """True when ``on at`` is not later than now."""
    return _instant(on, at) <= _reference_now(now)


def is_future_or_equal(on: date, at: time, now: Optional[datetime] = None) -> bool:
    """True when ``on at`` is not earlier than now."""
    return _instant(on, at) >= _reference_now(now)


def compute_arrival(
    flight_type: FlightType,
    departure_date: date,
    departure_time: time,
) -> Tuple[date, time]:
    """
    Derive the local arrival date and time for a departure.

    The route's flight duration and timezone offset are applied as one
    combined minute delta to the departure instant, then the calendar date
    and time of day are re-derived, so month, year and leap-day rollovers
    fall out of ``datetime`` arithmetic.

    Args:
        flight_type: Route selector
        departure_date: Local departure date
        departure_time: Local departure time

    Returns:
        Tuple[date, time]: Arrival date and time of day

    Raises:
        InvalidTemporalOrderingError: If the arrival falls past the last
            representable date
    """
    route = get_route(flight_type)
    departure = datetime.combine(departure_date, departure_time.replace(second=0, microsecond=0))
    try:
        arrival = departure + timedelta(minutes=route.arrival_shift_minutes)
    except OverflowError:
        raise InvalidTemporalOrderingError("Arrival date is beyond the supported calendar")
    return arrival.date(), arrival.time()


def parse_date(raw: str) -> date:
    """Parse ``dd/mm/yyyy`` into a date, enforcing calendar rules."""
    match = _DATE_PATTERN.match(raw.strip())
    if not match:
        raise InvalidDateError(f"Invalid date '{raw}', expected dd/mm/yyyy")
    day, month, year = (int(part) for part in match.groups())
    if not validate_date(day, month, year):
        raise InvalidDateError(f"Invalid date '{raw}'")
    return date(year, month, day)


def parse_time(raw: str) -> time:
    """Parse a 24 hour ``hh:mm`` value into a time of day."""
    match = _TIME_PATTERN.match(raw.strip())
    if not match:
        raise InvalidTimeError(f"Invalid time '{raw}', expected hh:mm")
    hour, minute = (int(part) for part in match.groups())
    if not validate_time(hour, minute):
        raise InvalidTimeError(f"Invalid time '{raw}'")
    return time(hour, minute)


def ensure_birth_date_in_past(birth_date: date, now: Optional[datetime] = None) -> date:
    # Birth dates are compared at midnight.
    if not is_past_or_equal(birth_date, time(0, 0), now):
        raise InvalidTemporalOrderingError("Birth date must be in the past")
    return birth_date


def ensure_flight_in_future(
    flight_date: date,
    departure_time: time,
    now: Optional[datetime] = None,
) -> Tuple[date, time]:
    if not is_future_or_equal(flight_date, departure_time, now):
        raise InvalidTemporalOrderingError("Flight date and time must be present or future")
    return flight_date, departure_time


def format_date(value: date) -> str:
    return f"{value.day:02d}/{value.month:02d}/{value.year:04d}"


def format_time(value: time) -> str:
    return f"{value.hour:02d}:{value.minute:02d}"
