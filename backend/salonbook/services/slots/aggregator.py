# backend/salonbook/services/slots/aggregator.py
"""
Availability aggregation over a vendor's staff.

Vendor-wide: one envelope for the weekday, built from every staff member
marked available:
    earliest start, latest end, union of all breaks.

The union can under-block: a break of one staff member removes the slot
for the whole vendor even if a colleague is free. Slots are later pruned
only by bookings, never reconciled per staff member.

Specific staff: that member's own DaySchedule, used as-is.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from .schedule import BreakPeriod, DaySchedule, WeeklySchedule
from .timeutils import Weekday


@dataclass(frozen=True)
class AvailabilityEnvelope:
    earliest_start: str
    latest_end: str
    merged_breaks: tuple[BreakPeriod, ...]
    staff_count: int  # staff members available on the weekday


def available_days(
    schedules: Iterable[WeeklySchedule],
    weekday: Weekday,
) -> list[DaySchedule]:
    """DaySchedules of the given weekday that are marked available."""
    days = (schedule.for_day(weekday) for schedule in schedules)
    return [day for day in days if day.is_available]


def build_vendor_envelope(
    schedules: Iterable[WeeklySchedule],
    weekday: Weekday,
) -> AvailabilityEnvelope | None:
    """
    Fold staff schedules into one envelope.

    Returns None when nobody works on that weekday ("closed today").
    """
    days = available_days(schedules, weekday)
    if not days:
        return None

    # Compare by minutes: "9:00" and "09:00" are both valid stored values
    earliest = min(days, key=lambda d: d.start_minutes)
    latest = max(days, key=lambda d: d.end_minutes)

    merged: list[BreakPeriod] = []
    for day in days:
        merged.extend(day.breaks)

    return AvailabilityEnvelope(
        earliest_start=earliest.start_time,
        latest_end=latest.end_time,
        merged_breaks=tuple(merged),
        staff_count=len(days),
    )


def staff_day_window(schedule: WeeklySchedule, weekday: Weekday) -> DaySchedule | None:
    """A single staff member's working day, or None on a day off."""
    day = schedule.for_day(weekday)
    return day if day.is_available else None
