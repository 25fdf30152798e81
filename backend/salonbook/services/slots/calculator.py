# backend/salonbook/services/slots/calculator.py
"""
Slot generator.

Walks the working window [start, end) in fixed steps and emits every
candidate start time that does not fall inside a break.

Contains:
✓ working hours
✓ breaks (a start time inside [break_start, break_end) is skipped)

Does NOT contain:
✗ Bookings (conflicts.py)
✗ Service duration (conflicts.py)
"""

from collections.abc import Iterable

from .schedule import BreakPeriod
from .timeutils import format_time_12h, minutes_to_time_str, time_str_to_minutes


def generate_slot_minutes(
    start_time: str,
    end_time: str,
    interval_minutes: int = 30,
    breaks: Iterable[BreakPeriod] = (),
) -> list[int]:
    """
    Candidate start times as minute-of-day integers, ascending.

    start == end (or start > end) yields an empty list.
    Overlapping breaks are tolerated.
    """
    if interval_minutes <= 0:
        raise ValueError(f"interval_minutes must be positive, got {interval_minutes}")

    start_min = time_str_to_minutes(start_time)
    end_min = time_str_to_minutes(end_time)
    break_ranges = [(b.start_minutes, b.end_minutes) for b in breaks]

    slots: list[int] = []
    t = start_min
    while t < end_min:
        if not any(b_start <= t < b_end for b_start, b_end in break_ranges):
            slots.append(t)
        t += interval_minutes

    return slots


def format_minutes_12h(minutes: int) -> str:
    return format_time_12h(minutes_to_time_str(minutes))
