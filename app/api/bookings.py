from fastapi import APIRouter, Depends, Query, Request, status
from typing import Optional

from app.core.config import settings
from app.models.booking import AvailabilityView, Booking, BookingCreate, BookingPage, MessageResponse, SlotsInfo
from app.services.booking_service import BookingService

router = APIRouter()

def get_booking_service(request: Request) -> BookingService:
    return request.app.state.booking_service

@router.post("/bookings", response_model=Booking, status_code=status.HTTP_201_CREATED)
async def create_booking(req: BookingCreate, service: BookingService = Depends(get_booking_service)):
    return await service.create_booking(req.model_dump())

@router.get("/bookings", response_model=BookingPage)
async def list_bookings(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    service: BookingService = Depends(get_booking_service),
):
    return await service.list_bookings(page, limit)

@router.delete("/bookings/{booking_id}", response_model=MessageResponse)
async def delete_booking(booking_id: int, service: BookingService = Depends(get_booking_service)):
    await service.delete_booking(booking_id)
    return {"message": "Booking deleted successfully"}

@router.get("/availability", response_model=AvailabilityView)
async def get_availability(
    date: str,
    hours: Optional[int] = Query(None),
    service: BookingService = Depends(get_booking_service),
):
    return await service.availability(date, hours)

@router.get("/slots", response_model=SlotsInfo)
async def get_slots(service: BookingService = Depends(get_booking_service)):
    return service.slots_info()
