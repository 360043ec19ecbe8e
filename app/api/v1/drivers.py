from fastapi import APIRouter, Depends, File, Form, Request, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
from app.database import get_db
from app.schemas.auth import SuccessResponse
from app.schemas.driver import DriverForm, DriverResponse
from app.services.driver_registry import DriverRegistry
from app.middleware.auth import require_manager

router = APIRouter()


def get_driver_registry(
    request: Request,
    db: AsyncSession = Depends(get_db)
) -> DriverRegistry:
    return DriverRegistry(db, request.app.state.photo_storage)


def driver_form(
    name: Optional[str] = Form(None),
    phone: Optional[str] = Form(None),
    address: Optional[str] = Form(None),
    license_no: Optional[str] = Form(None),
    license_expiry: Optional[str] = Form(None),
    aadhaar: Optional[str] = Form(None),
    status: Optional[str] = Form(None),
    assigned_vehicle: Optional[str] = Form(None),
) -> DriverForm:
    return DriverForm(
        name=name,
        phone=phone,
        address=address,
        license_no=license_no,
        license_expiry=license_expiry,
        aadhaar=aadhaar,
        status=status,
        assigned_vehicle=assigned_vehicle,
    )


@router.get("", response_model=List[DriverResponse])
async def list_drivers(registry: DriverRegistry = Depends(get_driver_registry)):
    """List all drivers, newest first"""
    return await registry.list_drivers()


@router.get("/{driver_id}", response_model=DriverResponse)
async def get_driver(
    driver_id: int,
    registry: DriverRegistry = Depends(get_driver_registry)
):
    return await registry.get_driver(driver_id)


@router.post("", response_model=DriverResponse, status_code=status.HTTP_201_CREATED)
async def create_driver(
    form: DriverForm = Depends(driver_form),
    profile_photo: Optional[UploadFile] = File(None),
    manager: dict = Depends(require_manager),
    registry: DriverRegistry = Depends(get_driver_registry)
):
    """Register a driver, optionally with a profile photo"""
    return await registry.create_driver(form, profile_photo)


@router.put("/{driver_id}", response_model=DriverResponse)
async def update_driver(
    driver_id: int,
    form: DriverForm = Depends(driver_form),
    profile_photo: Optional[UploadFile] = File(None),
    manager: dict = Depends(require_manager),
    registry: DriverRegistry = Depends(get_driver_registry)
):
    """Replace a driver's details; the photo is kept unless a new one is uploaded"""
    return await registry.update_driver(driver_id, form, profile_photo)


@router.delete("/{driver_id}", response_model=SuccessResponse)
async def delete_driver(
    driver_id: int,
    manager: dict = Depends(require_manager),
    registry: DriverRegistry = Depends(get_driver_registry)
):
    await registry.delete_driver(driver_id)
    return SuccessResponse()
