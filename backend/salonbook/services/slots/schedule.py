# backend/salonbook/services/slots/schedule.py
"""
Staff schedule model.

Stored format (staff.schedule, JSON text keyed by weekday name):

    {
      "monday": {
        "isAvailable": true,
        "startTime": "09:00",
        "endTime": "18:00",
        "breaks": [{"startTime": "13:00", "endTime": "14:00"}]
      },
      ...
    }

A missing weekday, or one that fails to parse, reads as unavailable.
When isAvailable is false the times and breaks are ignored.
"""

import json
import logging
import re
from dataclasses import dataclass, field

from ...errors import FormatError
from .timeutils import Weekday, time_str_to_minutes

logger = logging.getLogger(__name__)

# Same pattern the staff-management forms validate against
TIME_PATTERN = re.compile(r"^([01]?[0-9]|2[0-3]):[0-5][0-9]$")


@dataclass(frozen=True)
class BreakPeriod:
    start_time: str
    end_time: str

    @property
    def start_minutes(self) -> int:
        return time_str_to_minutes(self.start_time)

    @property
    def end_minutes(self) -> int:
        return time_str_to_minutes(self.end_time)

    def to_dict(self) -> dict:
        return {"startTime": self.start_time, "endTime": self.end_time}


@dataclass(frozen=True)
class DaySchedule:
    is_available: bool = False
    start_time: str = "00:00"
    end_time: str = "00:00"
    breaks: tuple[BreakPeriod, ...] = field(default_factory=tuple)

    @property
    def start_minutes(self) -> int:
        return time_str_to_minutes(self.start_time)

    @property
    def end_minutes(self) -> int:
        return time_str_to_minutes(self.end_time)

    def to_dict(self) -> dict:
        return {
            "isAvailable": self.is_available,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "breaks": [b.to_dict() for b in self.breaks],
        }


UNAVAILABLE_DAY = DaySchedule()


@dataclass(frozen=True)
class WeeklySchedule:
    days: dict[Weekday, DaySchedule] = field(default_factory=dict)

    def for_day(self, weekday: Weekday) -> DaySchedule:
        return self.days.get(weekday, UNAVAILABLE_DAY)

    def is_available_on(self, weekday: Weekday) -> bool:
        return self.for_day(weekday).is_available

    def to_dict(self) -> dict:
        return {day.value: self.days[day].to_dict() for day in Weekday if day in self.days}


# ── Parsing ──────────────────────────────────────────────────────────────


def _check_time(value) -> str:
    if not isinstance(value, str) or not TIME_PATTERN.match(value):
        raise FormatError(f"Invalid time {value!r}, expected HH:MM")
    return value


def _time_or_default(value, default: str = "00:00") -> str:
    if isinstance(value, str) and TIME_PATTERN.match(value):
        return value
    return default


def parse_day_schedule(raw: dict | None) -> DaySchedule:
    """Build a DaySchedule from its stored dict. Raises FormatError."""
    if not raw:
        return UNAVAILABLE_DAY
    if not isinstance(raw, dict):
        raise FormatError("Day schedule must be an object")

    is_available = bool(raw.get("isAvailable", True))
    if not is_available:
        # Times of a day off are kept for display only
        return DaySchedule(
            is_available=False,
            start_time=_time_or_default(raw.get("startTime")),
            end_time=_time_or_default(raw.get("endTime")),
        )

    breaks = []
    for item in raw.get("breaks") or []:
        if not isinstance(item, dict):
            raise FormatError("Break must be an object")
        breaks.append(BreakPeriod(
            start_time=_check_time(item.get("startTime")),
            end_time=_check_time(item.get("endTime")),
        ))

    return DaySchedule(
        is_available=is_available,
        start_time=_check_time(raw.get("startTime")),
        end_time=_check_time(raw.get("endTime")),
        breaks=tuple(breaks),
    )


def parse_weekly_schedule(raw: str | dict | None) -> WeeklySchedule:
    """
    Read a stored staff schedule.

    Accepts the JSON text column or an already-decoded dict.
    Days that fail to parse are logged and treated as unavailable.
    """
    if isinstance(raw, str):
        try:
            data = json.loads(raw) if raw else {}
        except json.JSONDecodeError:
            logger.warning("Staff schedule is not valid JSON, treating as empty")
            data = {}
    else:
        data = raw or {}

    if not isinstance(data, dict):
        logger.warning("Staff schedule is not an object, treating as empty")
        return WeeklySchedule()

    days: dict[Weekday, DaySchedule] = {}
    for weekday in Weekday:
        if weekday.value not in data:
            continue
        try:
            days[weekday] = parse_day_schedule(data[weekday.value])
        except FormatError as e:
            logger.warning(f"Ignoring malformed {weekday.value} schedule: {e.message}")
            days[weekday] = UNAVAILABLE_DAY

    return WeeklySchedule(days=days)


# ── Validation ───────────────────────────────────────────────────────────


def validate_day_schedule(day: DaySchedule) -> None:
    """
    Check the invariants of an available day:
    start < end, every break inside [start, end), breaks do not overlap.
    """
    if not day.is_available:
        return

    start, end = day.start_minutes, day.end_minutes
    if start >= end:
        raise FormatError("Start time must be before end time")

    intervals = sorted((b.start_minutes, b.end_minutes) for b in day.breaks)
    previous_end = None
    for b_start, b_end in intervals:
        if b_start >= b_end:
            raise FormatError("Break start must be before break end")
        if b_start < start or b_end > end:
            raise FormatError("Breaks must fall within working hours")
        if previous_end is not None and b_start < previous_end:
            raise FormatError("Breaks must not overlap")
        previous_end = b_end


def validate_weekly_schedule(schedule: WeeklySchedule) -> None:
    for day in schedule.days.values():
        validate_day_schedule(day)


# ── Defaults ─────────────────────────────────────────────────────────────


def _workday(end_time: str) -> DaySchedule:
    return DaySchedule(
        is_available=True,
        start_time="09:00",
        end_time=end_time,
        breaks=(BreakPeriod("13:00", "14:00"),),
    )


# 9 AM to 6 PM, Monday to Friday; Saturday until 5 PM; Sunday off
DEFAULT_WEEKLY_SCHEDULE = WeeklySchedule(days={
    Weekday.MONDAY: _workday("18:00"),
    Weekday.TUESDAY: _workday("18:00"),
    Weekday.WEDNESDAY: _workday("18:00"),
    Weekday.THURSDAY: _workday("18:00"),
    Weekday.FRIDAY: _workday("18:00"),
    Weekday.SATURDAY: _workday("17:00"),
    Weekday.SUNDAY: DaySchedule(is_available=False, start_time="09:00", end_time="17:00"),
})
