# backend/salonbook/services/slots/config.py
"""
Booking configuration for slots calculation.
"""

from dataclasses import dataclass
from functools import lru_cache

from ...config import settings


@dataclass(frozen=True)
class BookingConfig:
    """
    Configuration for the availability engine.

    Attributes:
        slot_step_minutes: Slot generator granularity (15/30/60)
        default_service_duration: Duration used by staff queries when none is given
        default_booking_duration: Minutes occupied by a booking stored without a duration
    """
    slot_step_minutes: int = 30  # 15 / 30 / 60
    default_service_duration: int = 60
    default_booking_duration: int = 60

    def __post_init__(self):
        """Validate configuration."""
        if self.slot_step_minutes not in (15, 30, 60):
            raise ValueError(f"slot_step_minutes must be 15, 30, or 60, got {self.slot_step_minutes}")
        if self.default_service_duration <= 0:
            raise ValueError("default_service_duration must be positive")


@lru_cache
def get_booking_config() -> BookingConfig:
    """Get booking configuration (singleton), built from settings."""
    return BookingConfig(
        slot_step_minutes=settings.slot_step_minutes,
        default_service_duration=settings.default_service_duration,
    )
