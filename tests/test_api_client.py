import pytest
from unittest.mock import MagicMock, patch

from app.services.api_client import BookingApiClient, BookingApiError


def mock_response(status_code, body):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body
    return response


@patch("app.services.api_client.requests.get")
def test_list_bookings(mock_get):
    mock_get.return_value = mock_response(200, {"totalBookings": 0, "totalPages": 0, "currentPage": 2, "bookings": []})

    api = BookingApiClient("http://backend:5000/")
    data = api.list_bookings(page=2, limit=5)

    assert data["currentPage"] == 2
    args, kwargs = mock_get.call_args
    assert args[0] == "http://backend:5000/api/bookings"
    assert kwargs["params"] == {"page": 2, "limit": 5}


@patch("app.services.api_client.requests.post")
def test_create_booking_conflict_raises(mock_post):
    mock_post.return_value = mock_response(400, {"message": "A booking already exists that overlaps with the selected date, time, or duration."})

    with pytest.raises(BookingApiError) as exc_info:
        BookingApiClient("http://backend").create_booking({"name": "Ada"})

    assert exc_info.value.status_code == 400
    assert "overlaps" in exc_info.value.message
    assert mock_post.call_args.kwargs["json"] == {"name": "Ada"}


@patch("app.services.api_client.requests.delete")
def test_delete_booking(mock_delete):
    mock_delete.return_value = mock_response(200, {"message": "Booking deleted successfully"})

    result = BookingApiClient("http://backend").delete_booking(3)

    assert result["message"] == "Booking deleted successfully"
    assert mock_delete.call_args.args[0] == "http://backend/api/bookings/3"


@patch("app.services.api_client.requests.get")
def test_non_json_error_body(mock_get):
    response = mock_response(502, None)
    response.json.side_effect = ValueError("no json")
    response.text = "Bad Gateway"
    mock_get.return_value = response

    with pytest.raises(BookingApiError) as exc_info:
        BookingApiClient("http://backend").availability("2024-01-01")
    assert exc_info.value.message == "Bad Gateway"
