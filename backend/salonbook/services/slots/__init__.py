# backend/salonbook/services/slots/__init__.py
"""
Staff/vendor availability and slot generation.

timeutils → calculator → schedule → aggregator → conflicts → availability
"""

from .config import BookingConfig, get_booking_config
from .calculator import format_minutes_12h, generate_slot_minutes
from .schedule import DEFAULT_WEEKLY_SCHEDULE, WeeklySchedule, parse_weekly_schedule
from .aggregator import AvailabilityEnvelope, build_vendor_envelope
from .availability import get_staff_availability, get_vendor_availability

__all__ = [
    "BookingConfig",
    "get_booking_config",
    "generate_slot_minutes",
    "format_minutes_12h",
    "DEFAULT_WEEKLY_SCHEDULE",
    "WeeklySchedule",
    "parse_weekly_schedule",
    "AvailabilityEnvelope",
    "build_vendor_envelope",
    "get_staff_availability",
    "get_vendor_availability",
]
