import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient

from app.core.config import settings
from app.core.config_loader import load_restaurant_config
from app.services.booking_service import BookingService
from app.services.db_service import InMemoryBookingStore


@pytest.fixture
def restaurant_config():
    return load_restaurant_config()


@pytest.fixture
def store():
    return InMemoryBookingStore()


@pytest.fixture
def service(store, restaurant_config):
    return BookingService(store, restaurant_config)


@pytest.fixture
def client():
    from app.main import app
    # Entering the context runs the lifespan, which builds a fresh store
    with patch.object(settings, "STORE_BACKEND", "memory"):
        with TestClient(app) as test_client:
            yield test_client


def _booking_data(**overrides):
    data = {
        "name": "Ada Lovelace",
        "contact": "0123456789",
        "date": "2024-01-01",
        "time": "6:00 PM",
        "guests": 2,
        "hours": 2,
    }
    data.update(overrides)
    return data


@pytest.fixture
def make_booking():
    return _booking_data
