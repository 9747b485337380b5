import asyncio
import math
from datetime import datetime
from typing import Any, Dict, List, Optional

from app.core.config_loader import get_duration_limits, get_min_guests, get_slot_labels
from app.core.errors import BookingConflictError, BookingValidationError
from app.core.logger import logger
from app.models.booking import AvailabilityView, Booking, BookingPage, FieldError, SlotsInfo
from app.services.availability import build_availability
from app.services.db_service import BookingStore
from app.services.overlap import find_conflict, parse_date, within_calendar
from app.services.validation import clean_booking, validate_booking


class BookingService:
    def __init__(self, store: BookingStore, config: Dict[str, Any]):
        self.store = store
        self.config = config
        self.slots = get_slot_labels(config)
        self.min_hours, self.max_hours = get_duration_limits(config)
        self.min_guests = get_min_guests(config)
        # Serialises check-then-insert for requests handled by this process
        self._write_lock = asyncio.Lock()

    def slots_info(self) -> SlotsInfo:
        return SlotsInfo(
            slots=self.slots,
            min_hours=self.min_hours,
            max_hours=self.max_hours,
            min_guests=self.min_guests,
        )

    def validate(self, data: Dict[str, Any]) -> List[FieldError]:
        return validate_booking(
            data, self.slots,
            min_hours=self.min_hours, max_hours=self.max_hours, min_guests=self.min_guests,
        )

    async def create_booking(self, data: Dict[str, Any]) -> Booking:
        """
        Validates the candidate, rejects it if it overlaps a booking on the same
        date, otherwise persists it and returns the stored record.
        """
        errors = self.validate(data)
        if errors:
            logger.warning(f"⚠️ Booking rejected (validation): {[e.field for e in errors]}")
            raise BookingValidationError(errors)

        candidate = clean_booking(data, self.slots)
        logger.info(f"📥 Booking Request - Date: {candidate['date']}, Time: {candidate['time']}, Hours: {candidate['hours']}")

        async with self._write_lock:
            existing = await self.store.find_by_date(candidate["date"])
            conflict = find_conflict(candidate["date"], candidate["time"], candidate["hours"], existing)
            if conflict is not None:
                logger.warning(
                    f"⚠️ Booking rejected (overlap): {candidate['date']} {candidate['time']} "
                    f"+{candidate['hours']}h clashes with booking {conflict.get('id')}"
                )
                raise BookingConflictError(conflict)

            candidate["created_at"] = datetime.now()
            stored = await self.store.insert(candidate)

        booking = Booking.model_validate(stored)
        logger.info(f"✅ Booking {booking.id} created for {booking.name} ({booking.guests} guests)")
        return booking

    async def list_bookings(self, page: int = 1, limit: int = 10) -> BookingPage:
        offset = (page - 1) * limit
        records, total = await self.store.list_page(offset, limit)
        return BookingPage(
            totalBookings=total,
            totalPages=math.ceil(total / limit),
            currentPage=page,
            bookings=[Booking.model_validate(r) for r in records],
        )

    async def delete_booking(self, booking_id: int) -> bool:
        """Deleting an id that does not exist still succeeds."""
        await self.store.delete(booking_id)
        logger.info(f"🗑️ Booking {booking_id} deleted.")
        return True

    async def availability(self, day: str, hours: Optional[int] = None) -> AvailabilityView:
        hours = self.min_hours if hours is None else hours
        errors = []
        try:
            day = parse_date(day).isoformat()
        except ValueError:
            errors.append(FieldError(field="date", message="Date must be in YYYY-MM-DD format."))
        else:
            if not within_calendar(day, self.slots, self.max_hours):
                errors.append(FieldError(field="date", message="Date is out of range."))
        if not (self.min_hours <= hours <= self.max_hours):
            errors.append(FieldError(field="hours", message=f"Hours must be between {self.min_hours} and {self.max_hours}."))
        if errors:
            raise BookingValidationError(errors)

        existing = await self.store.find_by_date(day)
        return AvailabilityView(
            date=day,
            hours=hours,
            slots=build_availability(self.slots, day, existing, hours),
        )
