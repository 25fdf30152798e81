# backend/salonbook/services/slots/timeutils.py
"""
Time helpers shared by the slot engine.

Three representations are used:
- "HH:MM"        24-hour strings, as stored in staff schedules
- minute-of-day  integers in [0, 1439], used for all arithmetic
- "h:mm AM/PM"   display strings returned to clients
"""

import re
from datetime import date, datetime
from enum import Enum

from ...errors import FormatError, ValidationError

MINUTES_PER_DAY = 24 * 60

_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})$")


class Weekday(str, Enum):
    SUNDAY = "sunday"
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"

    @classmethod
    def from_date(cls, value: date) -> "Weekday":
        # date.weekday(): 0 = Monday ... 6 = Sunday
        return _BY_PY_WEEKDAY[value.weekday()]


_BY_PY_WEEKDAY = (
    Weekday.MONDAY,
    Weekday.TUESDAY,
    Weekday.WEDNESDAY,
    Weekday.THURSDAY,
    Weekday.FRIDAY,
    Weekday.SATURDAY,
    Weekday.SUNDAY,
)


def time_str_to_minutes(value: str) -> int:
    """Parse "HH:MM" into minutes since midnight."""
    match = _TIME_RE.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise FormatError(f"Invalid time {value!r}, expected HH:MM")

    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise FormatError(f"Time out of range: {value!r}")
    return hours * 60 + minutes


def minutes_to_time_str(minutes: int) -> str:
    """Inverse of time_str_to_minutes. Caller keeps input in [0, 1439]."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def format_time_12h(time24: str) -> str:
    """Convert "HH:MM" to "h:mm AM/PM", e.g. "13:05" -> "1:05 PM"."""
    total = time_str_to_minutes(time24)
    hours, minutes = divmod(total, 60)
    period = "PM" if hours >= 12 else "AM"
    if hours == 0:
        hours12 = 12
    elif hours > 12:
        hours12 = hours - 12
    else:
        hours12 = hours
    return f"{hours12}:{minutes:02d} {period}"


def parse_date_param(raw: str | None) -> date:
    """
    Parse a query-string date.

    Accepts "YYYY-MM-DD" and full ISO datetimes. A datetime with an offset
    is converted to local time before its date is taken.
    """
    if raw is None or not raw.strip():
        raise ValidationError("Date parameter is required")

    raw = raw.strip()
    try:
        return date.fromisoformat(raw)
    except ValueError:
        pass
    try:
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        raise ValidationError("Invalid date format") from None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed.date()


def parse_duration_param(raw: str | int | None, default: int) -> int:
    """Service duration in minutes. Must be a positive whole number."""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ValidationError("Duration must be a whole number of minutes") from None
    if value <= 0 or value > MINUTES_PER_DAY:
        raise ValidationError("Duration must be between 1 and 1440 minutes")
    return value
