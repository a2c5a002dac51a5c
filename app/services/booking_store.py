"""
JSON file backed booking store
Reads the whole booking list before each operation and rewrites it after each change
"""
import json
import logging
import os
import tempfile
import threading
import time
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

import pydantic

from app.errors import Conflict, NotFound, StorageError, ValidationError
from app.models import Booking, BookingCreate, REQUIRED_FIELDS, parse_date

logger = logging.getLogger(__name__)


def _generate_id() -> str:
    """Millisecond timestamp plus a short random suffix"""
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:9]}"


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _describe_errors(error: pydantic.ValidationError) -> str:
    parts = []
    for err in error.errors():
        field = ".".join(str(loc) for loc in err["loc"]) or "booking"
        message = err["msg"].removeprefix("Value error, ")
        parts.append(f"{field}: {message}")
    return "Invalid booking - " + "; ".join(parts)


def _slot_of(record: Booking | Any) -> tuple[Any, Any]:
    """(date, time) held by a stored record, parsed or not"""
    if isinstance(record, Booking):
        return record.date, record.time
    if not isinstance(record, dict):
        return None, None
    day = record.get("date")
    try:
        day = parse_date(day).isoformat()
    except (TypeError, ValueError):
        pass
    return day, record.get("time")


class BookingStore:
    """Booking list persisted as a pretty-printed JSON array"""

    def __init__(self, path: str | os.PathLike):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read(self) -> list[Booking | Any]:
        """
        Load every record; raises StorageError when the file is unreadable.

        Records that do not validate as a Booking are returned unchanged so
        they are written back as they were.
        """
        if not self.path.exists():
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e

        if not isinstance(raw, list):
            raise StorageError(f"Cannot read {self.path}: expected a JSON array")

        records = []
        for item in raw:
            try:
                records.append(Booking.model_validate(item))
            except pydantic.ValidationError:
                logger.warning("Keeping unreadable booking record as is: %r", item)
                records.append(item)
        return records

    def _read_bookings(self) -> list[Booking]:
        return [record for record in self._read() if isinstance(record, Booking)]

    def _write(self, records: list[Booking | Any]) -> None:
        """Replace the file contents with the given records"""
        data = [
            record.model_dump(by_alias=True) if isinstance(record, Booking) else record
            for record in records
        ]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2)
                os.replace(tmp_path, self.path)
            except BaseException:
                os.unlink(tmp_path)
                raise
        except OSError as e:
            raise StorageError(f"Cannot write {self.path}: {e}") from e

    def list_bookings(self, date_filter: Optional[str] = None) -> list[Booking]:
        """
        Return all bookings, or only those on date_filter.

        Unreadable storage is logged and treated as no bookings.
        """
        try:
            bookings = self._read_bookings()
        except StorageError:
            logger.exception("Error loading bookings, treating as empty")
            return []

        if date_filter:
            return [booking for booking in bookings if booking.date == date_filter]
        return bookings

    def get_booking(self, booking_id: str) -> Booking:
        for booking in self._read_bookings():
            if booking.id == booking_id:
                return booking
        raise NotFound("Booking not found")

    def create_booking(self, data: dict[str, Any]) -> Booking:
        """
        Validate and store a new booking.

        Args:
            data: Submitted fields (name, email, phone, date, time, guests)

        Returns:
            The stored booking with generated id and createdAt

        Raises:
            ValidationError: a field is missing or malformed
            Conflict: the (date, time) slot is already taken
            StorageError: the booking file could not be read or written
        """
        if not isinstance(data, dict) or any(_is_missing(data.get(f)) for f in REQUIRED_FIELDS):
            raise ValidationError("All fields are required")

        try:
            details = BookingCreate.model_validate({f: data[f] for f in REQUIRED_FIELDS})
        except pydantic.ValidationError as e:
            raise ValidationError(_describe_errors(e)) from None

        # Conflict check and append form one critical section
        with self._lock:
            records = self._read()
            if any(_slot_of(record) == (details.date, details.time) for record in records):
                logger.info("Slot %s %s already booked", details.date, details.time)
                raise Conflict("This time slot is already booked")

            booking = Booking(
                **details.model_dump(),
                id=_generate_id(),
                created_at=_utc_timestamp(),
            )
            records.append(booking)
            self._write(records)

        logger.info("Booking created: %s for %s on %s at %s", booking.id, booking.name, booking.date, booking.time)
        return booking

    def delete_booking(self, booking_id: str) -> Booking:
        """Remove a booking and return it"""
        with self._lock:
            records = self._read()
            for index, record in enumerate(records):
                if isinstance(record, Booking) and record.id == booking_id:
                    break
            else:
                raise NotFound("Booking not found")

            del records[index]
            self._write(records)

        logger.info("Booking deleted: %s", booking_id)
        return record
