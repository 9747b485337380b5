from datetime import date
from unittest.mock import patch

import pytest
from streamlit.testing.v1 import AppTest

from app.services.api_client import BookingApiClient, BookingApiError

RULES = {"slots": ["6:00 PM", "7:00 PM", "8:00 PM", "9:00 PM"], "min_hours": 1, "max_hours": 5, "min_guests": 1}

AVAILABILITY = {
    "date": "2024-01-01",
    "hours": 1,
    "slots": [
        {"time": "6:00 PM", "available": False},
        {"time": "7:00 PM", "available": False},
        {"time": "8:00 PM", "available": True},
        {"time": "9:00 PM", "available": True},
    ],
}

BOOKING = {"id": 1, "name": "Ada", "contact": "0123456789", "date": "2024-01-01", "time": "8:00 PM", "guests": 2, "hours": 1}


def page_of(total_pages):
    def list_bookings(page, limit):
        rows = [dict(BOOKING, id=page)] if page <= total_pages else []
        return {"totalBookings": total_pages * limit, "totalPages": total_pages, "currentPage": page, "bookings": rows}
    return list_bookings


@pytest.fixture
def api():
    with patch.object(BookingApiClient, "slots", return_value=RULES), \
         patch.object(BookingApiClient, "availability", return_value=AVAILABILITY) as mock_availability, \
         patch.object(BookingApiClient, "list_bookings", side_effect=page_of(3)) as mock_list, \
         patch.object(BookingApiClient, "create_booking", return_value=BOOKING) as mock_create:
        yield {"availability": mock_availability, "list": mock_list, "create": mock_create}


def load_app():
    return AppTest.from_file("../frontend.py", default_timeout=30)


def test_time_choices_follow_availability(api):
    at = load_app().run()
    assert at.selectbox[0].options == []

    at.date_input[0].set_value(date(2024, 1, 1)).run()

    assert at.selectbox[0].options == ["8:00 PM", "9:00 PM"]
    assert api["availability"].call_args.args == ("2024-01-01", 1)


def test_successful_booking_returns_to_first_page(api):
    at = load_app()
    at.session_state["page"] = 2
    at.run()

    at.date_input[0].set_value(date(2024, 1, 1)).run()
    at.text_input[0].input("Ada")
    at.text_input[1].input("0123456789")
    at.selectbox[0].set_value("8:00 PM")
    at.number_input[1].set_value(2)
    next(b for b in at.button if b.label == "Book table").click().run()

    payload = api["create"].call_args.args[0]
    assert (payload["date"], payload["time"], payload["guests"], payload["hours"]) == ("2024-01-01", "8:00 PM", 2, 1)
    assert at.session_state["page"] == 1
    assert not at.exception


def test_page_is_clamped_after_last_page_empties(api):
    api["list"].side_effect = page_of(2)
    at = load_app()
    at.session_state["page"] = 3
    at.run()

    assert at.session_state["page"] == 2
    assert any("Page 2 of 2" in md.value for md in at.markdown)


def test_api_errors_are_shown_not_raised(api):
    api["list"].side_effect = BookingApiError(500, "database unavailable")
    at = load_app().run()

    assert not at.exception
    assert [e.value for e in at.error] == ["database unavailable"]
