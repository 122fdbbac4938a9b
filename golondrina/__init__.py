"""
Golondrina Veloz ticket office

An in-memory reservation registry for a single-operator airline ticket office:
1. Passenger records keyed by a unique travel document
2. Per-flight, per-class seat inventory with randomized allocation
3. Arrival schedule computation and boarding pass data

State lives for the duration of one run; nothing is persisted.
"""

__version__ = "0.1.0"
