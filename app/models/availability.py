from pydantic import BaseModel, ConfigDict, Field


class AvailabilitySummary(BaseModel):
    """Slot occupancy for a single date, computed per request"""

    model_config = ConfigDict(populate_by_name=True)

    date: str
    has_slots: bool = Field(alias="hasSlots")
    available_slots: int = Field(alias="availableSlots")
    available_times: list[str] = Field(alias="availableTimes")
