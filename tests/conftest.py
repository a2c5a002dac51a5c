"""
Pytest configuration and fixtures
"""
from datetime import datetime
import pytest
from fastapi.testclient import TestClient
from app.config import Settings
from app.main import create_app
from app.services.booking_store import BookingStore


# Clock used by the API tests: 2025-06-01 at 10:30 local time
FIXED_NOW = datetime(2025, 6, 1, 10, 30)


@pytest.fixture
def test_settings(tmp_path):
    """Settings isolated from the environment"""
    return Settings(
        bookings_file=str(tmp_path / "data" / "bookings.json"),
        cors_origins="http://localhost:3000,http://localhost:3001",
        twilio_account_sid="",
        twilio_auth_token="",
        twilio_phone_number="",
        restaurant_name="Test Bistro",
    )


@pytest.fixture
def store(test_settings):
    """Booking store backed by a temporary file"""
    return BookingStore(test_settings.bookings_file)


@pytest.fixture
def client(test_settings, store):
    """Test client with an isolated store and fixed clock"""
    app = create_app(settings=test_settings, store=store, clock=lambda: FIXED_NOW)
    return TestClient(app)


@pytest.fixture
def booking_data():
    """Valid booking submission"""
    return {
        "name": "Jane Doe",
        "email": "jane.doe@gmail.com",
        "phone": "+1234567890",
        "date": "2025-06-01",
        "time": "18:00",
        "guests": 4,
    }


@pytest.fixture
def sample_booking(store, booking_data):
    """Create sample booking"""
    return store.create_booking(booking_data)


# Test markers
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
