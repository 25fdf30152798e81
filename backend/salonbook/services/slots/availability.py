# backend/salonbook/services/slots/availability.py
"""
Availability service.

Vendor query:
    vendor → active staff → weekday envelope → candidate slots
    → bookings of the day → slots annotated with availability

Staff query:
    staff → that weekday's schedule → candidate slots
    → drop starts that overrun the day or a break → staff bookings
    → slots annotated with availability

Both are point-in-time snapshots: nothing is written or reserved, and
the result is recomputed on every call.
"""

import logging
from datetime import date, datetime, time

from sqlalchemy.orm import Session

from ...errors import NotFoundError
from .aggregator import build_vendor_envelope, staff_day_window
from .calculator import generate_slot_minutes
from .config import BookingConfig, get_booking_config
from .conflicts import (
    available_times,
    booking_intervals,
    drop_unfit_slots,
    mark_booked_slots,
)
from .schedule import parse_weekly_schedule
from .store import (
    find_bookings_by_vendor_and_date_range,
    find_staff_by_id,
    find_staff_by_vendor,
    find_vendor_by_id,
)
from .timeutils import (
    Weekday,
    format_time_12h,
    parse_date_param,
    parse_duration_param,
)

logger = logging.getLogger(__name__)

NO_STAFF_MESSAGE = "No staff members available"
CLOSED_MESSAGE = "Closed today"


def _day_bounds(target_date: date) -> tuple[datetime, datetime]:
    return (
        datetime.combine(target_date, time.min),
        datetime.combine(target_date, time(23, 59, 59)),
    )


def _closed_vendor_response(vendor_id: int, target_date: date, weekday: Weekday, message: str) -> dict:
    return {
        "vendor_id": vendor_id,
        "date": target_date,
        "day_of_week": weekday.value,
        "is_open": False,
        "business_hours": None,
        "time_slots": [],
        "available_slots": [],
        "total_slots": 0,
        "booked_slots": 0,
        "staff_count": 0,
        "message": message,
    }


def get_vendor_availability(
    db: Session,
    vendor_id: int,
    date_param: str | None = None,
    duration_param: str | int | None = None,
    now: datetime | None = None,
    config: BookingConfig | None = None,
) -> dict:
    """
    Business hours and bookable slots of a vendor for one day.

    A missing or blank date_param means the date of `now`. duration_param (minutes)
    defaults to the slot step and only affects booking conflicts.

    Raises:
        ValidationError: malformed date or duration.
        NotFoundError: vendor does not exist, is inactive or is not a vendor account.
        DependencyError: store read failed.
    """
    config = config or get_booking_config()
    now = now or datetime.now()

    if date_param and date_param.strip():
        target_date = parse_date_param(date_param)
    else:
        target_date = now.date()
    duration = parse_duration_param(duration_param, config.slot_step_minutes)
    weekday = Weekday.from_date(target_date)

    vendor = find_vendor_by_id(db, vendor_id)
    if not vendor or vendor.user_type != "vendor" or not vendor.is_active:
        raise NotFoundError("Vendor not found")

    staff_members = find_staff_by_vendor(db, vendor_id)
    if not staff_members:
        return _closed_vendor_response(vendor_id, target_date, weekday, NO_STAFF_MESSAGE)

    schedules = [parse_weekly_schedule(s.schedule) for s in staff_members]
    envelope = build_vendor_envelope(schedules, weekday)
    if envelope is None:
        return _closed_vendor_response(vendor_id, target_date, weekday, CLOSED_MESSAGE)

    candidates = generate_slot_minutes(
        envelope.earliest_start,
        envelope.latest_end,
        config.slot_step_minutes,
        envelope.merged_breaks,
    )

    day_start, day_end = _day_bounds(target_date)
    bookings = find_bookings_by_vendor_and_date_range(db, vendor_id, day_start, day_end)
    busy = booking_intervals(bookings, target_date, config.default_booking_duration)
    slots = mark_booked_slots(candidates, busy, duration)

    open_display = format_time_12h(envelope.earliest_start)
    close_display = format_time_12h(envelope.latest_end)
    free = available_times(slots)

    logger.info(
        f"Vendor availability fetched: vendor={vendor_id} date={target_date} "
        f"day={weekday.value} staff={envelope.staff_count} "
        f"total={len(slots)} available={len(free)}"
    )

    return {
        "vendor_id": vendor_id,
        "date": target_date,
        "day_of_week": weekday.value,
        "is_open": True,
        "business_hours": {
            "open": open_display,
            "close": close_display,
            "display": f"{open_display} - {close_display}",
        },
        "time_slots": [{"time": s.time, "available": s.available} for s in slots],
        "available_slots": free,
        "total_slots": len(slots),
        "booked_slots": len(slots) - len(free),
        "staff_count": envelope.staff_count,
        "message": None,
    }


def get_staff_availability(
    db: Session,
    staff_id: int,
    date_param: str | None,
    duration_param: str | int | None = None,
    config: BookingConfig | None = None,
) -> dict:
    """
    Bookable start times of one staff member for a service of given duration.

    The date is required. Duration defaults to config.default_service_duration.
    is_available reports whether the weekday is a working day at all,
    regardless of how many slots remain.

    Raises:
        ValidationError: missing/malformed date or duration.
        NotFoundError: staff member does not exist or is inactive.
        DependencyError: store read failed.
    """
    config = config or get_booking_config()

    target_date = parse_date_param(date_param)
    duration = parse_duration_param(duration_param, config.default_service_duration)
    weekday = Weekday.from_date(target_date)

    staff = find_staff_by_id(db, staff_id)
    if not staff or not staff.is_active:
        raise NotFoundError("Staff member not found")

    schedule = parse_weekly_schedule(staff.schedule)
    day = staff_day_window(schedule, weekday)

    result = {
        "staff_id": staff.id,
        "staff_name": staff.full_name,
        "date": target_date,
        "day_of_week": weekday.value,
        "duration": duration,
        "time_slots": [],
        "available_slots": [],
        "is_available": day is not None,
        "schedule": schedule.to_dict(),
    }

    if day is None:
        logger.info(f"Staff {staff_id} not available on {target_date} ({weekday.value})")
        return result

    candidates = generate_slot_minutes(
        day.start_time,
        day.end_time,
        config.slot_step_minutes,
        day.breaks,
    )
    candidates = drop_unfit_slots(candidates, duration, day.end_minutes, day.breaks)

    day_start, day_end = _day_bounds(target_date)
    bookings = find_bookings_by_vendor_and_date_range(
        db, staff.vendor_id, day_start, day_end, staff_id=staff.id,
    )
    busy = booking_intervals(bookings, target_date, config.default_booking_duration)
    slots = mark_booked_slots(candidates, busy, duration)

    result["time_slots"] = [{"time": s.time, "available": s.available} for s in slots]
    result["available_slots"] = available_times(slots)

    logger.info(
        f"Staff availability checked: staff={staff_id} date={target_date} "
        f"duration={duration} candidates={len(slots)} "
        f"available={len(result['available_slots'])}"
    )
    return result
