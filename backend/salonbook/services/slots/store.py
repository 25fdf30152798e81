# backend/salonbook/services/slots/store.py
"""
Read-only store access for the availability engine.

Every read goes through _read(); any SQLAlchemyError (including lock and
connection timeouts) is logged and re-raised as DependencyError so driver
details never reach the client.
"""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import TypeVar

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...errors import DependencyError
from ...models import Bookings, Staff, Users
from .conflicts import ACTIVE_BOOKING_STATUSES

logger = logging.getLogger(__name__)

T = TypeVar("T")

_SQLITE_DATETIME = "%Y-%m-%d %H:%M:%S"


def _read(what: str, query: Callable[[], T]) -> T:
    try:
        return query()
    except SQLAlchemyError as e:
        logger.exception(f"Store read failed: {what}")
        raise DependencyError() from e


def find_vendor_by_id(db: Session, vendor_id: int) -> Users | None:
    """User row for vendor_id, or None. user_type and is_active are checked by the caller."""
    return _read(
        f"vendor {vendor_id}",
        lambda: db.query(Users).filter(Users.id == vendor_id).first(),
    )


def find_staff_by_id(db: Session, staff_id: int) -> Staff | None:
    return _read(
        f"staff {staff_id}",
        lambda: db.query(Staff).filter(Staff.id == staff_id).first(),
    )


def find_staff_by_vendor(db: Session, vendor_id: int) -> list[Staff]:
    """Active staff members of a vendor."""
    return _read(
        f"staff of vendor {vendor_id}",
        lambda: (
            db.query(Staff)
            .filter(
                Staff.vendor_id == vendor_id,
                Staff.is_active == 1,
            )
            .order_by(Staff.id)
            .all()
        ),
    )


def find_bookings_by_vendor_and_date_range(
    db: Session,
    vendor_id: int,
    day_start: datetime,
    day_end: datetime,
    staff_id: int | None = None,
) -> list[Bookings]:
    """
    Pending/confirmed bookings of a vendor with date_start in [day_start, day_end].

    Narrowed to one staff member when staff_id is given.
    """
    def query():
        # datetime() normalizes both "T" and space separated ISO text
        q = db.query(Bookings).filter(
            Bookings.vendor_id == vendor_id,
            func.datetime(Bookings.date_start) >= day_start.strftime(_SQLITE_DATETIME),
            func.datetime(Bookings.date_start) <= day_end.strftime(_SQLITE_DATETIME),
            Bookings.status.in_(ACTIVE_BOOKING_STATUSES),
        )
        if staff_id is not None:
            q = q.filter(Bookings.staff_id == staff_id)
        return q.order_by(func.datetime(Bookings.date_start)).all()

    return _read(f"bookings of vendor {vendor_id}", query)
