"""
HTTP tests for the availability endpoints.
"""

from unittest.mock import MagicMock, patch

import pytest

from redis.exceptions import ConnectionError as RedisConnectionError
from sqlalchemy.exc import OperationalError

from salonbook.database import get_db
from salonbook.main import app

from factories import MONDAY, SUNDAY, day

MORNING = {"monday": day("09:00", "12:00", [("10:00", "10:30")])}


def test_vendor_availability_response_shape(client, make_vendor, make_staff, make_booking):
    vendor = make_vendor()
    make_staff(vendor, MORNING)
    make_booking(vendor, "2026-10-19T10:30:00", duration=30)

    resp = client.get(f"/vendors/{vendor.id}/availability", params={"date": MONDAY})

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    data = body["data"]
    assert data["vendorId"] == vendor.id
    assert data["date"] == MONDAY
    assert data["dayOfWeek"] == "monday"
    assert data["isOpen"] is True
    assert data["businessHours"]["display"] == "9:00 AM - 12:00 PM"
    assert data["availableSlots"] == ["9:00 AM", "9:30 AM", "11:00 AM", "11:30 AM"]
    assert {"time": "10:30 AM", "available": False} in data["timeSlots"]
    assert data["totalSlots"] == 5
    assert data["bookedSlots"] == 1
    assert data["staffCount"] == 1


def test_vendor_availability_defaults_to_today(client, make_vendor, make_staff):
    vendor = make_vendor()
    make_staff(vendor, MORNING)

    resp = client.get(f"/vendors/{vendor.id}/availability")

    assert resp.status_code == 200
    assert resp.json()["data"]["date"] == MONDAY


@pytest.mark.parametrize("blank", ["", "   "])
def test_vendor_blank_date_means_today(client, make_vendor, make_staff, blank):
    vendor = make_vendor()
    make_staff(vendor, MORNING)

    resp = client.get(f"/vendors/{vendor.id}/availability", params={"date": blank})

    assert resp.status_code == 200
    assert resp.json()["data"]["date"] == MONDAY


def test_vendor_closed_is_not_an_error(client, make_vendor, make_staff):
    vendor = make_vendor()
    make_staff(vendor, MORNING)

    resp = client.get(f"/vendors/{vendor.id}/availability", params={"date": SUNDAY})

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["isOpen"] is False
    assert data["message"] == "Closed today"
    assert data["businessHours"] is None
    assert data["availableSlots"] == []


def test_vendor_not_found(client):
    resp = client.get("/vendors/999/availability", params={"date": MONDAY})

    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "Vendor not found"}


def test_inactive_vendor_not_found(client, db, make_vendor, make_staff):
    vendor = make_vendor()
    make_staff(vendor, MORNING)
    vendor.is_active = 0
    db.commit()

    resp = client.get(f"/vendors/{vendor.id}/availability", params={"date": MONDAY})

    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "Vendor not found"}


def test_vendor_bad_date(client, make_vendor):
    vendor = make_vendor()

    resp = client.get(f"/vendors/{vendor.id}/availability", params={"date": "tomorrow"})

    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid date format"


def test_staff_availability_response_shape(client, make_vendor, make_staff):
    vendor = make_vendor()
    staff = make_staff(vendor, {"monday": day("09:00", "11:00")})

    resp = client.get(
        f"/staff/{staff.id}/availability",
        params={"date": MONDAY, "duration": "90"},
    )

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["staffId"] == staff.id
    assert data["staffName"] == "Anna Stone"
    assert data["availableSlots"] == ["9:00 AM", "9:30 AM"]
    assert data["isAvailable"] is True
    assert data["duration"] == 90
    assert data["schedule"] == {"monday": day("09:00", "11:00")}


def test_staff_requires_date(client, make_vendor, make_staff):
    staff = make_staff(make_vendor(), MORNING)

    resp = client.get(f"/staff/{staff.id}/availability")

    assert resp.status_code == 400
    assert resp.json() == {"success": False, "error": "Date parameter is required"}


def test_staff_bad_duration(client, make_vendor, make_staff):
    staff = make_staff(make_vendor(), MORNING)

    resp = client.get(f"/staff/{staff.id}/availability", params={"date": MONDAY, "duration": "long"})

    assert resp.status_code == 400


def test_staff_not_found(client):
    resp = client.get("/staff/999/availability", params={"date": MONDAY})

    assert resp.status_code == 404
    assert resp.json()["error"] == "Staff member not found"


def test_store_failure_is_generic_500(client):
    broken = MagicMock()
    broken.query.side_effect = OperationalError("SELECT", {}, Exception("disk I/O error at /var/db"))

    def _broken_db():
        yield broken

    app.dependency_overrides[get_db] = _broken_db

    resp = client.get("/vendors/1/availability", params={"date": MONDAY})

    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "Failed to fetch availability"}


def test_health_reports_redis_down(client):
    with patch("salonbook.main.redis_client") as redis_mock:
        redis_mock.ping.side_effect = RedisConnectionError("refused")
        resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "degraded", "database": True, "redis": False}


def test_health_all_up(client):
    with patch("salonbook.main.redis_client") as redis_mock:
        redis_mock.ping.return_value = True
        resp = client.get("/health")

    assert resp.json()["status"] == "healthy"
