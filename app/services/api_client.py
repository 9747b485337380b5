import requests
from typing import Any, Dict, Optional

from app.core.config import settings
from app.core.logger import logger

TIMEOUT = 10


class BookingApiError(Exception):
    """The booking API answered with an error status."""

    def __init__(self, status_code: int, message: str, errors: Optional[list] = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.errors = errors or []


class BookingApiClient:
    """Thin HTTP client used by the booking form."""

    def __init__(self, base_url: Optional[str] = None):
        self.base_url = (base_url or settings.BACKEND_URL).rstrip("/")

    def _url(self, path: str) -> str:
        return f"{self.base_url}/api{path}"

    def _handle(self, response: requests.Response) -> Dict[str, Any]:
        if response.status_code >= 400:
            try:
                body = response.json()
            except ValueError:
                body = {"message": response.text}
            logger.warning(f"⚠️ API {response.status_code}: {body.get('message')}")
            raise BookingApiError(response.status_code, body.get("message", "Request failed"), body.get("errors"))
        return response.json()

    def list_bookings(self, page: int = 1, limit: int = 5) -> Dict[str, Any]:
        response = requests.get(self._url("/bookings"), params={"page": page, "limit": limit}, timeout=TIMEOUT)
        return self._handle(response)

    def create_booking(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        response = requests.post(self._url("/bookings"), json=payload, timeout=TIMEOUT)
        return self._handle(response)

    def delete_booking(self, booking_id: int) -> Dict[str, Any]:
        response = requests.delete(self._url(f"/bookings/{booking_id}"), timeout=TIMEOUT)
        return self._handle(response)

    def availability(self, day: str, hours: int = 1) -> Dict[str, Any]:
        response = requests.get(self._url("/availability"), params={"date": day, "hours": hours}, timeout=TIMEOUT)
        return self._handle(response)

    def slots(self) -> Dict[str, Any]:
        return self._handle(requests.get(self._url("/slots"), timeout=TIMEOUT))
