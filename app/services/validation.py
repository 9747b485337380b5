"""
Explicit validation for candidate bookings.

`validate_booking` never raises; it returns every problem it finds as a
FieldError so the API and the booking form can show them per field.
`clean_booking` assumes validation passed and returns the normalised record.
"""
import re
from typing import Any, Dict, List, Optional, Sequence

from app.models.booking import FieldError
from app.services.overlap import parse_date, parse_time, within_calendar

REQUIRED_FIELDS = ("name", "contact", "date", "time", "guests", "hours")
CONTACT_PATTERN = re.compile(r"^[0-9]{10}$")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and re.fullmatch(r"\s*-?\d+\s*", value):
        return int(value)
    return None


def match_slot(time: str, slots: Sequence[str]) -> Optional[str]:
    """Returns the configured label for `time` (e.g. "18:00" -> "6:00 PM"), or None."""
    try:
        wanted = parse_time(time)
    except ValueError:
        return None
    for label in slots:
        if parse_time(label) == wanted:
            return label
    return None


def validate_booking(
    data: Dict[str, Any],
    slots: Sequence[str],
    min_hours: int = 1,
    max_hours: int = 5,
    min_guests: int = 1,
) -> List[FieldError]:
    errors: List[FieldError] = []

    for field in REQUIRED_FIELDS:
        if _is_blank(data.get(field)):
            errors.append(FieldError(field=field, message=f"{field.capitalize()} is required.", code="missing"))
    missing = {e.field for e in errors}

    if "name" not in missing and not isinstance(data["name"], str):
        errors.append(FieldError(field="name", message="Name must be text."))

    if "contact" not in missing:
        contact = str(data["contact"]).strip()
        if not CONTACT_PATTERN.match(contact):
            errors.append(FieldError(field="contact", message="Contact must be a valid 10-digit number."))

    if "date" not in missing:
        try:
            parse_date(str(data["date"]))
        except ValueError:
            errors.append(FieldError(field="date", message="Date must be in YYYY-MM-DD format."))
        else:
            if not within_calendar(str(data["date"]), slots, max_hours):
                errors.append(FieldError(field="date", message="Date is out of range."))

    if "time" not in missing and match_slot(str(data["time"]), slots) is None:
        errors.append(FieldError(field="time", message=f"Time must be one of: {', '.join(slots)}."))

    if "guests" not in missing:
        guests = _as_int(data["guests"])
        if guests is None or guests < min_guests:
            errors.append(FieldError(field="guests", message=f"Guests must be at least {min_guests}."))

    if "hours" not in missing:
        hours = _as_int(data["hours"])
        if hours is None or not (min_hours <= hours <= max_hours):
            errors.append(FieldError(field="hours", message=f"Hours must be between {min_hours} and {max_hours}."))

    return errors


def clean_booking(data: Dict[str, Any], slots: Sequence[str]) -> Dict[str, Any]:
    return {
        "name": data["name"].strip(),
        "contact": str(data["contact"]).strip(),
        "date": parse_date(str(data["date"])).isoformat(),
        "time": match_slot(str(data["time"]), slots),
        "guests": _as_int(data["guests"]),
        "hours": _as_int(data["hours"]),
    }
