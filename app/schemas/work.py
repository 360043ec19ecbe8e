from pydantic import BaseModel, field_validator
from typing import Optional
import datetime as dt
from app.core.derivations import CLOCK_RE


class WorkSessionPayload(BaseModel):
    """
    Body of create and update requests.
    driver_id and date are checked by the work log so a missing value gets the
    same 400 message whichever is absent
    """
    driver_id: Optional[int] = None
    date: Optional[dt.date] = None
    machine: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    odometer_start: Optional[float] = None
    odometer_end: Optional[float] = None
    description: Optional[str] = None
    location: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("start_time", "end_time")
    @classmethod
    def check_clock(cls, value):
        if value is not None and not CLOCK_RE.fullmatch(value):
            raise ValueError("expected HH:MM between 00:00 and 23:59")
        return value


class WorkSessionResponse(BaseModel):
    id: int
    driver_id: int
    date: dt.date
    machine: Optional[str]
    start_time: Optional[str]
    end_time: Optional[str]
    odometer_start: Optional[float]
    odometer_end: Optional[float]
    description: Optional[str]
    location: Optional[str]
    total_hours: Optional[float]
    total_km: Optional[float]
    created_at: Optional[dt.datetime] = None

    class Config:
        from_attributes = True


class WorkSessionListItem(WorkSessionResponse):
    driver_name: str


class WorkSessionFilters(BaseModel):
    driver_id: Optional[int] = None
    machine: Optional[str] = None
    date_from: Optional[dt.date] = None
    date_to: Optional[dt.date] = None

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        # "?driverId=" means no filter
        if isinstance(value, str) and not value.strip():
            return None
        return value
