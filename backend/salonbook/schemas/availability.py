# backend/salonbook/schemas/availability.py
"""
Pydantic schemas for availability API.

Fields are snake_case in Python and camelCase on the wire.
"""

from datetime import date
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class TimeSlotRead(CamelModel):
    """A start time ("h:mm AM/PM") and whether it can still be booked."""
    time: str
    available: bool


class BusinessHours(CamelModel):
    open: str
    close: str
    display: str  # "9:00 AM - 6:00 PM"


class VendorAvailability(CamelModel):
    vendor_id: int
    date: date
    day_of_week: str
    is_open: bool
    business_hours: BusinessHours | None = None
    time_slots: list[TimeSlotRead] = []
    available_slots: list[str] = []  # kept for older clients
    total_slots: int = 0
    booked_slots: int = 0
    staff_count: int = 0
    message: str | None = None


class BreakRead(CamelModel):
    start_time: str
    end_time: str


class DayScheduleRead(CamelModel):
    is_available: bool
    start_time: str
    end_time: str
    breaks: list[BreakRead] = []


class StaffAvailability(CamelModel):
    staff_id: int
    staff_name: str
    date: date
    day_of_week: str
    duration: int
    time_slots: list[TimeSlotRead] = []
    available_slots: list[str] = []
    is_available: bool
    schedule: dict[str, DayScheduleRead] = {}


class VendorAvailabilityResponse(CamelModel):
    success: bool = True
    data: VendorAvailability


class StaffAvailabilityResponse(CamelModel):
    success: bool = True
    data: StaffAvailability


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
