# backend/salonbook/services/slots/conflicts.py
"""
Booking conflict filter.

A slot starting at s for a service of d minutes occupies [s, s + d).
A booking starting at b for d_b minutes occupies [b, b + d_b).
They conflict iff  s < b + d_b  and  s + d > b.

That single inequality covers the three cases: slot start inside a booking,
slot end inside a booking, and the slot containing a booking.

Pure read-and-compute: nothing here locks or writes bookings.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime

from .calculator import format_minutes_12h
from .schedule import BreakPeriod

ACTIVE_BOOKING_STATUSES = ("pending", "confirmed")


@dataclass(frozen=True)
class Interval:
    """Half-open [start, end) in minutes relative to the target day's midnight."""
    start: int
    end: int

    def overlaps(self, other: "Interval") -> bool:
        return self.start < other.end and self.end > other.start


@dataclass(frozen=True)
class TimeSlot:
    minutes: int
    available: bool

    @property
    def time(self) -> str:
        return format_minutes_12h(self.minutes)


def _booking_start(value) -> datetime:
    dt = datetime.fromisoformat(value) if isinstance(value, str) else value
    if dt.tzinfo is not None:
        # Stored values are local wall-clock times
        dt = dt.astimezone().replace(tzinfo=None)
    return dt


def booking_intervals(
    bookings: Iterable,
    target_date: date,
    default_duration: int = 60,
) -> list[Interval]:
    """
    Convert booking rows to intervals on target_date's minute axis.

    Rows with a status other than pending/confirmed are ignored.
    """
    midnight = datetime.combine(target_date, datetime.min.time())
    intervals: list[Interval] = []

    for booking in bookings:
        status = getattr(booking, "status", "pending")
        if status not in ACTIVE_BOOKING_STATUSES:
            continue
        start_dt = _booking_start(booking.date_start)
        start = int((start_dt - midnight).total_seconds() // 60)
        duration = booking.duration_minutes or default_duration
        intervals.append(Interval(start, start + duration))

    return intervals


def break_intervals(breaks: Iterable[BreakPeriod]) -> list[Interval]:
    return [Interval(b.start_minutes, b.end_minutes) for b in breaks]


def has_conflict(slot_start: int, duration: int, busy: Iterable[Interval]) -> bool:
    slot = Interval(slot_start, slot_start + duration)
    return any(slot.overlaps(other) for other in busy)


def drop_unfit_slots(
    candidates: Iterable[int],
    duration: int,
    day_end: int,
    breaks: Iterable[BreakPeriod] = (),
) -> list[int]:
    """
    Remove starts whose service would run past day_end or into a break.

    Used for a single staff member, whose own day bounds are exact.
    """
    blocked = break_intervals(breaks)
    return [
        t for t in candidates
        if t + duration <= day_end and not has_conflict(t, duration, blocked)
    ]


def mark_booked_slots(
    candidates: Iterable[int],
    busy: list[Interval],
    duration: int,
) -> list[TimeSlot]:
    """Annotate every candidate with available=False when it hits a booking."""
    return [
        TimeSlot(minutes=t, available=not has_conflict(t, duration, busy))
        for t in candidates
    ]


def available_times(slots: Iterable[TimeSlot]) -> list[str]:
    return [slot.time for slot in slots if slot.available]
