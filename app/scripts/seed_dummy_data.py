"""
Script to seed a few drivers and work sessions for local testing
Run with: python -m app.scripts.seed_dummy_data
"""
import asyncio
from datetime import date, timedelta
from sqlalchemy import select
from app.config import get_settings
from app.database import create_engine_from_settings, create_session_factory, init_db
from app.models.driver import Driver
from app.schemas.driver import DriverForm
from app.schemas.work import WorkSessionPayload
from app.services.driver_registry import DriverRegistry
from app.services.work_log import WorkLog
from app.core.errors import DuplicateEntry
from app.core.uploads import PhotoStorage


DRIVERS = [
    DriverForm(name="Ravi Kumar", phone="+91 9876543210", license_no="KA0120190001234",
               license_expiry="2029-03-31", assigned_vehicle="JCB-3DX-01"),
    DriverForm(name="Suresh Patil", phone="+91 9123456780", license_no="MH1220180005678",
               license_expiry="2027-11-15", assigned_vehicle="TIPPER-07"),
]

MACHINES = ["JCB-3DX-01", "TIPPER-07"]


async def seed_data():
    """Seed dummy data"""
    print("Seeding dummy data...")
    settings = get_settings()
    engine = create_engine_from_settings(settings)
    await init_db(engine)
    session_factory = create_session_factory(engine)

    async with session_factory() as db:
        registry = DriverRegistry(db, PhotoStorage(settings.UPLOAD_DIR))
        work_log = WorkLog(db)

        drivers = []
        for form in DRIVERS:
            result = await db.execute(select(Driver).where(Driver.name == form.name))
            driver = result.scalar_one_or_none()
            if driver:
                print(f"Driver {form.name} already exists, skipping...")
            else:
                driver = await registry.create_driver(form)
                print(f"Created driver {driver.name} (id={driver.id})")
            drivers.append(driver)

        today = date.today()
        for offset in range(3):
            for driver, machine in zip(drivers, MACHINES):
                odometer_start = 1000 + offset * 120
                payload = WorkSessionPayload(
                    driver_id=driver.id,
                    date=today - timedelta(days=offset),
                    machine=machine,
                    start_time="08:00",
                    end_time="17:30",
                    odometer_start=odometer_start,
                    odometer_end=odometer_start + 85,
                    location="Site A",
                )
                try:
                    await work_log.create_work(payload)
                except DuplicateEntry:
                    print(f"Work session for {driver.name} on {payload.date} already exists, skipping...")

    await engine.dispose()
    print("\n✅ Dummy data seeded successfully!")


if __name__ == "__main__":
    asyncio.run(seed_data())
