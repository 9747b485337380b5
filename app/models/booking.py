from typing import Optional, List, Union
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict

# --- Incoming Request Models ---

class BookingCreate(BaseModel):
    """
    Candidate booking as submitted by the form.
    Everything is optional here; `validate_booking` decides what is missing or malformed,
    so clients get one structured list of field errors instead of a framework 422.
    """
    name: Optional[str] = None
    contact: Optional[Union[str, int]] = None
    date: Optional[str] = None
    time: Optional[str] = None
    guests: Optional[Union[int, str]] = None
    hours: Optional[Union[int, str]] = None

# --- Stored / Outgoing Models ---

class Booking(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    name: str
    contact: str
    date: str
    time: str
    guests: int
    hours: int
    created_at: datetime = Field(default_factory=datetime.now)

class BookingPage(BaseModel):
    totalBookings: int
    totalPages: int
    currentPage: int
    bookings: List[Booking]

class FieldError(BaseModel):
    field: str
    message: str
    code: str = "invalid"

class SlotAvailability(BaseModel):
    time: str
    available: bool

class AvailabilityView(BaseModel):
    date: str
    hours: int
    slots: List[SlotAvailability]

class SlotsInfo(BaseModel):
    slots: List[str]
    min_hours: int
    max_hours: int
    min_guests: int

class MessageResponse(BaseModel):
    message: str
