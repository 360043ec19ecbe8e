from fastapi import UploadFile
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from typing import List, Optional
from app.models.driver import Driver, DEFAULT_STATUS
from app.schemas.driver import DriverForm
from app.core.errors import NotFound, ValidationError
from app.core.uploads import PhotoStorage
import logging

logger = logging.getLogger(__name__)


class DriverRegistry:
    """Driver records plus their optional profile photo"""

    def __init__(self, db: AsyncSession, storage: PhotoStorage):
        self.db = db
        self.storage = storage

    async def list_drivers(self) -> List[Driver]:
        """All drivers, newest first"""
        result = await self.db.execute(select(Driver).order_by(Driver.id.desc()))
        return list(result.scalars().all())

    async def get_driver(self, driver_id: int) -> Driver:
        result = await self.db.execute(select(Driver).where(Driver.id == driver_id))
        driver = result.scalar_one_or_none()
        if not driver:
            raise NotFound()
        return driver

    async def create_driver(self, form: DriverForm, photo: Optional[UploadFile] = None) -> Driver:
        if not form.name:
            raise ValidationError("Name required")

        driver = Driver(
            name=form.name,
            phone=form.phone,
            address=form.address,
            license_no=form.license_no,
            license_expiry=form.license_expiry,
            aadhaar=form.aadhaar,
            profile_photo=await self.storage.save(photo),
            status=form.status or DEFAULT_STATUS,
            assigned_vehicle=form.assigned_vehicle,
        )
        self.db.add(driver)
        await self.db.commit()
        await self.db.refresh(driver)

        logger.info(f"Created driver {driver.id}")
        return driver

    async def update_driver(self, driver_id: int, form: DriverForm, photo: Optional[UploadFile] = None) -> Driver:
        """
        Replace every scalar field. The stored photo path changes only when a
        new file comes with the request
        """
        if not form.name:
            raise ValidationError("Name required")

        driver = await self.get_driver(driver_id)

        driver.name = form.name
        driver.phone = form.phone
        driver.address = form.address
        driver.license_no = form.license_no
        driver.license_expiry = form.license_expiry
        driver.aadhaar = form.aadhaar
        driver.status = form.status or DEFAULT_STATUS
        driver.assigned_vehicle = form.assigned_vehicle

        # The previous file stays on disk
        photo_path = await self.storage.save(photo)
        if photo_path:
            driver.profile_photo = photo_path

        await self.db.commit()
        await self.db.refresh(driver)
        return driver

    async def delete_driver(self, driver_id: int) -> None:
        """Remove the driver row; its uploaded photo is not deleted"""
        result = await self.db.execute(delete(Driver).where(Driver.id == driver_id))
        if result.rowcount == 0:
            raise NotFound()
        await self.db.commit()
        logger.info(f"Deleted driver {driver_id}")
