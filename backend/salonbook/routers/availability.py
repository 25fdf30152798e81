# backend/salonbook/routers/availability.py
"""
Availability API endpoints.

GET /vendors/{vendor_id}/availability - Business hours and slots of a vendor
GET /staff/{staff_id}/availability    - Slots of one staff member for a service duration

Date and duration arrive as raw strings; the service validates them so
that malformed values answer 400 rather than FastAPI's 422.
"""

from datetime import datetime
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..middleware.rate_limit import rate_limit
from ..schemas.availability import (
    ErrorResponse,
    StaffAvailability,
    StaffAvailabilityResponse,
    VendorAvailability,
    VendorAvailabilityResponse,
)
from ..services.slots import get_staff_availability, get_vendor_availability


router = APIRouter(
    tags=["availability"],
    dependencies=[Depends(rate_limit)],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


def get_now() -> datetime:
    """Reference instant for "today"; overridden in tests."""
    return datetime.now()


@router.get("/vendors/{vendor_id}/availability", response_model=VendorAvailabilityResponse)
def vendor_availability(
    vendor_id: int,
    date: str | None = Query(None, description="YYYY-MM-DD, defaults to today"),
    duration: str | None = Query(None, description="Service duration in minutes"),
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
):
    result = get_vendor_availability(
        db=db,
        vendor_id=vendor_id,
        date_param=date,
        duration_param=duration,
        now=now,
    )
    return VendorAvailabilityResponse(data=VendorAvailability(**result))


@router.get("/staff/{staff_id}/availability", response_model=StaffAvailabilityResponse)
def staff_availability(
    staff_id: int,
    date: str | None = Query(None, description="YYYY-MM-DD"),
    duration: str | None = Query(None, description="Service duration in minutes, default 60"),
    db: Session = Depends(get_db),
):
    result = get_staff_availability(
        db=db,
        staff_id=staff_id,
        date_param=date,
        duration_param=duration,
    )
    return StaffAvailabilityResponse(data=StaffAvailability(**result))
