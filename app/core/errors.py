from typing import List, Optional, Dict, Any

from app.models.booking import FieldError

CONFLICT_MESSAGE = "A booking already exists that overlaps with the selected date, time, or duration."


class BookingError(Exception):
    """Base error for booking operations."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message}


class BookingValidationError(BookingError):
    """Missing or malformed field(s) in a candidate booking."""

    def __init__(self, errors: List[FieldError], message: Optional[str] = None):
        if message is None:
            missing = [e.field for e in errors if e.code == "missing"]
            if missing:
                message = f"Missing required fields: {', '.join(missing)}."
            else:
                message = errors[0].message if len(errors) == 1 else "Invalid booking details."
        super().__init__(message)
        self.errors = errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "errors": [e.model_dump(exclude={"code"}) for e in self.errors],
        }


class BookingConflictError(BookingError):
    """The candidate's time window overlaps an existing booking on the same date."""

    def __init__(self, conflicting: Optional[Dict[str, Any]] = None, message: str = CONFLICT_MESSAGE):
        super().__init__(message)
        self.conflicting = conflicting


class StoreError(BookingError):
    """The booking store failed (connection, query, driver error)."""

    status_code = 500
