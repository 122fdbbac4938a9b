"""
Business logic services for the ticket office.

This module contains the seat inventory and the passenger registry built
on top of it.
"""

from .seat_inventory import SeatInventory, SeatLayout, DEFAULT_RANDOM_ATTEMPTS
from .registry import PassengerRegistry

__all__ = [
    'SeatInventory',
    'SeatLayout',
    'DEFAULT_RANDOM_ATTEMPTS',
    'PassengerRegistry',
]
