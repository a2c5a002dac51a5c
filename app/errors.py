"""
Booking error types
Each error carries the HTTP status the API layer responds with
"""


class BookingError(Exception):
    """Base error for booking operations"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BookingError):
    """Missing or malformed input"""

    status_code = 400


class NotFound(BookingError):
    """Unknown booking id"""

    status_code = 404


class Conflict(BookingError):
    """Slot already booked"""

    status_code = 400


class StorageError(BookingError):
    """Booking file could not be read or written"""

    status_code = 500
