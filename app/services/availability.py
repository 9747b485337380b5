from typing import Any, Dict, Iterable, List

from app.models.booking import SlotAvailability
from app.services.overlap import booking_interval


def build_availability(slots: Iterable[str], day: str, bookings: Iterable[Dict[str, Any]], hours: int = 1) -> List[SlotAvailability]:
    """
    For each slot label, is a booking of `hours` starting there free on `day`?
    Bookings on other dates are ignored.
    """
    taken = [
        booking_interval(b["date"], b["time"], b["hours"])
        for b in bookings
        if b.get("date") == day
    ]

    view = []
    for label in slots:
        candidate = booking_interval(day, label, hours)
        busy = any(candidate.overlaps(interval) for interval in taken)
        view.append(SlotAvailability(time=label, available=not busy))
    return view
