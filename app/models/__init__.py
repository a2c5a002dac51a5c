from app.models.booking import Booking, BookingCreate, REQUIRED_FIELDS
from app.models.availability import AvailabilitySummary
from app.models.slots import SLOT_GRID, parse_date, parse_time

__all__ = [
    "Booking",
    "BookingCreate",
    "REQUIRED_FIELDS",
    "AvailabilitySummary",
    "SLOT_GRID",
    "parse_date",
    "parse_time",
]
