"""
Reservation slot grid and date/time string helpers
"""
from datetime import date, datetime, time

# 11:00 to 21:30 every 30 minutes
SLOT_GRID: tuple[str, ...] = tuple(
    f"{hour:02d}:{minute:02d}" for hour in range(11, 22) for minute in (0, 30)
)


def parse_date(value: str) -> date:
    """Parse a 'YYYY-MM-DD' string, raising ValueError on anything else"""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_time(value: str) -> time:
    """Parse an 'HH:MM' string, raising ValueError on anything else"""
    return datetime.strptime(value, "%H:%M").time()
