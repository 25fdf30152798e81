"""
Pytest configuration and shared fixtures.
"""

import json
import os

# Settings are read at import time; keep tests off any real database or Redis
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")
os.environ["RATE_LIMIT_REQUESTS"] = "0"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from salonbook.database import get_db
from salonbook.main import app
from salonbook.models import Base, Bookings, Staff, Users
from salonbook.routers.availability import get_now

from factories import TODAY


@pytest.fixture
def db():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def make_vendor(db):
    def _make(business_name: str = "Glow Studio", user_type: str = "vendor") -> Users:
        vendor = Users(user_type=user_type, business_name=business_name, first_name="Owner")
        db.add(vendor)
        db.commit()
        return vendor
    return _make


@pytest.fixture
def make_staff(db):
    def _make(vendor: Users, schedule: dict | str, first_name: str = "Anna",
              last_name: str = "Stone", is_active: bool = True) -> Staff:
        staff = Staff(
            vendor_id=vendor.id,
            first_name=first_name,
            last_name=last_name,
            schedule=schedule if isinstance(schedule, str) else json.dumps(schedule),
            is_active=1 if is_active else 0,
        )
        db.add(staff)
        db.commit()
        return staff
    return _make


@pytest.fixture
def make_booking(db):
    def _make(vendor: Users, date_start: str, duration: int | None = 30,
              status: str = "confirmed", staff: Staff | None = None) -> Bookings:
        customer = Users(user_type="customer", first_name="Client")
        db.add(customer)
        db.flush()
        booking = Bookings(
            vendor_id=vendor.id,
            customer_id=customer.id,
            staff_id=staff.id if staff else None,
            date_start=date_start,
            duration_minutes=duration,
            status=status,
        )
        db.add(booking)
        db.commit()
        return booking
    return _make


@pytest.fixture
def client(db):
    def _get_db():
        yield db

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_now] = lambda: TODAY
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
