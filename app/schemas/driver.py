from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import datetime


class DriverForm(BaseModel):
    """Scalar driver fields as submitted in the multipart form"""
    name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    license_no: Optional[str] = None
    license_expiry: Optional[str] = None
    aadhaar: Optional[str] = None
    status: Optional[str] = None
    assigned_vehicle: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        # HTML forms send "" for untouched inputs
        if isinstance(value, str) and not value.strip():
            return None
        return value


class DriverResponse(BaseModel):
    id: int
    name: str
    phone: Optional[str]
    address: Optional[str]
    license_no: Optional[str]
    license_expiry: Optional[str]
    aadhaar: Optional[str]
    profile_photo: Optional[str]
    status: str
    assigned_vehicle: Optional[str]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
