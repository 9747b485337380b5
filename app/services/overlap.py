"""
Time window arithmetic for bookings.

A booking occupies the half-open interval [start, start + hours). Two bookings
conflict only when those intervals intersect, so a booking may start at the
exact moment another one ends.
"""
from datetime import date as date_type, datetime, timedelta
from typing import Any, Dict, Iterable, NamedTuple, Optional

TIME_FORMATS = ("%I:%M %p", "%I %p", "%H:%M", "%H:%M:%S")


def parse_date(value: str) -> date_type:
    """Parses a YYYY-MM-DD string. Raises ValueError otherwise."""
    return date_type.fromisoformat(value.strip())


def parse_time(value: str):
    """
    Parses a slot label ("6:00 PM", "6 PM") or a 24h time ("18:00").
    Raises ValueError if none of the formats match.
    """
    text = " ".join(value.strip().upper().split())
    for fmt in TIME_FORMATS:
        try:
            return datetime.strptime(text, fmt).time()
        except ValueError:
            continue
    raise ValueError(f"Unrecognised time: {value!r}")


def to_instant(day: str, time: str) -> datetime:
    """Combines a booking's date and start time into a single point in time."""
    return datetime.combine(parse_date(day), parse_time(time))


class Interval(NamedTuple):
    start: datetime
    end: datetime

    @property
    def empty(self) -> bool:
        return self.end <= self.start

    def overlaps(self, other: "Interval") -> bool:
        if self.empty or other.empty:
            return False
        return self.start < other.end and self.end > other.start


def booking_interval(day: str, time: str, hours: int) -> Interval:
    start = to_instant(day, time)
    return Interval(start, start + timedelta(hours=int(hours)))


def find_conflict(day: str, time: str, hours: int, existing: Iterable[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """
    Returns the first booking in `existing` on the same date whose window
    intersects the candidate's, or None if the candidate is free.
    """
    candidate = booking_interval(day, time, hours)
    for booking in existing:
        if booking.get("date") != day:
            continue
        if candidate.overlaps(booking_interval(booking["date"], booking["time"], booking["hours"])):
            return booking
    return None


def within_calendar(day: str, slots: Iterable[str], max_hours: int) -> bool:
    """
    False when a booking of `max_hours` from the latest slot on `day` would
    end past the last representable datetime.
    """
    try:
        latest = max(to_instant(day, label) for label in slots)
        latest + timedelta(hours=int(max_hours))
    except OverflowError:
        return False
    return True
