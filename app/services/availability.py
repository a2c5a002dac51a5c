"""
Availability calculation
Derives the bookable slots for each day of a date range from the current bookings
"""
from collections.abc import Iterable
from datetime import date, datetime, timedelta
from typing import Optional

from app.errors import ValidationError
from app.models import AvailabilitySummary, Booking, SLOT_GRID, parse_date, parse_time


def _to_date(value: str | date, label: str) -> date:
    if isinstance(value, date):
        return value
    try:
        return parse_date(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {label} date: {value!r}. Use YYYY-MM-DD") from None


def available_times_for(
    day: date, bookings: Iterable[Booking], now: datetime
) -> list[str]:
    """
    Free slots for one day, in grid order.

    Past days have none. For today, slots starting at or before the
    current minute are dropped.
    """
    today = now.date()
    if day < today:
        return []

    day_str = day.isoformat()
    booked = {booking.time for booking in bookings if booking.date == day_str}
    times = [slot for slot in SLOT_GRID if slot not in booked]

    if day == today:
        current = now.time().replace(second=0, microsecond=0)
        times = [slot for slot in times if parse_time(slot) > current]

    return times


def compute_availability(
    start_date: str | date,
    end_date: str | date,
    bookings: Iterable[Booking],
    now: Optional[datetime] = None,
) -> list[AvailabilitySummary]:
    """
    Compute slot availability for every date from start_date to end_date inclusive.

    Args:
        start_date: First day, 'YYYY-MM-DD'
        end_date: Last day, 'YYYY-MM-DD'
        bookings: Current bookings
        now: Evaluation time, defaults to local wall-clock time

    Returns:
        One summary per day in ascending order; empty when start_date > end_date
    """
    start = _to_date(start_date, "start")
    end = _to_date(end_date, "end")
    now = now or datetime.now()
    bookings = list(bookings)

    summaries = []
    for offset in range((end - start).days + 1):
        day = start + timedelta(days=offset)
        times = available_times_for(day, bookings, now)
        summaries.append(
            AvailabilitySummary(
                date=day.isoformat(),
                has_slots=len(times) > 0,
                available_slots=len(times),
                available_times=times,
            )
        )

    return summaries
