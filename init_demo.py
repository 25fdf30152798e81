import json
import os

from salonbook.database import SessionLocal, engine
from salonbook.models import Base, Staff, Users
from salonbook.services.slots.schedule import (
    DEFAULT_WEEKLY_SCHEDULE,
    validate_weekly_schedule,
)


# ======================================================
# ENV
# ======================================================

BUSINESS_NAME = os.getenv("DEMO_BUSINESS_NAME", "Demo Salon")
STAFF_NAMES = [
    ("Anna", "Stone"),
    ("Maria", "Lopez"),
]


# ======================================================
# MAIN LOGIC
# ======================================================

def main():
    Base.metadata.create_all(bind=engine)

    validate_weekly_schedule(DEFAULT_WEEKLY_SCHEDULE)
    schedule_json = json.dumps(DEFAULT_WEEKLY_SCHEDULE.to_dict())

    db = SessionLocal()
    try:
        vendor = (
            db.query(Users)
            .filter(Users.user_type == "vendor", Users.business_name == BUSINESS_NAME)
            .first()
        )

        if vendor:
            print(f"[DEMO] Vendor already exists (id={vendor.id}), nothing to do")
            return

        vendor = Users(user_type="vendor", business_name=BUSINESS_NAME, first_name="Owner")
        db.add(vendor)
        db.flush()

        for first_name, last_name in STAFF_NAMES:
            db.add(Staff(
                vendor_id=vendor.id,
                first_name=first_name,
                last_name=last_name,
                schedule=schedule_json,
            ))

        db.commit()
        print(f"[DEMO] Vendor '{BUSINESS_NAME}' created (id={vendor.id}) with {len(STAFF_NAMES)} staff")
    finally:
        db.close()


# ======================================================
# ENTRYPOINT
# ======================================================

if __name__ == "__main__":
    main()
