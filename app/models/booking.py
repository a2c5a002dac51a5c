from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from app.models.slots import SLOT_GRID, parse_date

REQUIRED_FIELDS = ("name", "email", "phone", "date", "time", "guests")


class BookingCreate(BaseModel):
    """Customer-submitted reservation details"""

    name: str = Field(..., min_length=1)
    email: EmailStr
    phone: str = Field(..., min_length=1)
    date: str
    time: str
    guests: int = Field(..., ge=1, le=10)

    @field_validator("name", "phone")
    @classmethod
    def _strip_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("date")
    @classmethod
    def _check_date(cls, value: str) -> str:
        try:
            return parse_date(value).isoformat()
        except ValueError:
            raise ValueError("must be a date in YYYY-MM-DD format") from None

    @field_validator("time")
    @classmethod
    def _check_time(cls, value: str) -> str:
        if value not in SLOT_GRID:
            raise ValueError(f"must be one of the reservation times {SLOT_GRID[0]}-{SLOT_GRID[-1]}")
        return value


class Booking(BookingCreate):
    """Stored reservation; serialized with camelCase keys"""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    created_at: str = Field(alias="createdAt")
