"""Slot availability arithmetic.

The scheduling backend reports `capacity` as the number of places still
free, with active bookings counted separately.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SlotAvailability:
    """Booked, total and free places of a slot."""

    active_bookings: int
    total_places: int
    available_places: int

    @property
    def is_full(self) -> bool:
        return self.available_places <= 0


def calculate_availability(capacity: int, active_bookings: int) -> SlotAvailability:
    """Compute availability, clamping negative inputs to zero.

    Args:
        capacity: Free places reported by the backend
        active_bookings: Active bookings on the slot

    Returns:
        SlotAvailability
    """
    safe_capacity = max(0, capacity)
    safe_bookings = max(0, active_bookings)

    return SlotAvailability(
        active_bookings=safe_bookings,
        total_places=safe_capacity + safe_bookings,
        available_places=safe_capacity,
    )
