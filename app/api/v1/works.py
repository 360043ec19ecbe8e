from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from pydantic import ValidationError as PydanticValidationError
from typing import List, Optional
from app.database import get_db
from app.schemas.auth import SuccessResponse
from app.schemas.work import (
    WorkSessionPayload, WorkSessionResponse,
    WorkSessionListItem, WorkSessionFilters
)
from app.services.work_log import WorkLog
from app.middleware.auth import require_manager
from app.core.errors import ValidationError

router = APIRouter()


def get_work_log(db: AsyncSession = Depends(get_db)) -> WorkLog:
    return WorkLog(db)


@router.get("", response_model=List[WorkSessionListItem])
async def list_works(
    driver_id: Optional[str] = Query(None, alias="driverId"),
    machine: Optional[str] = Query(None),
    date_from: Optional[str] = Query(None, alias="dateFrom"),
    date_to: Optional[str] = Query(None, alias="dateTo"),
    work_log: WorkLog = Depends(get_work_log)
):
    """List work sessions, optionally filtered by driver, machine and date range"""
    try:
        filters = WorkSessionFilters(
            driver_id=driver_id,
            machine=machine,
            date_from=date_from,
            date_to=date_to,
        )
    except PydanticValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors())
        raise ValidationError(f"Invalid filter: {fields}")

    return await work_log.list_works(filters)


@router.get("/{work_id}", response_model=WorkSessionResponse)
async def get_work(
    work_id: int,
    work_log: WorkLog = Depends(get_work_log)
):
    return await work_log.get_work(work_id)


@router.post("", response_model=WorkSessionResponse, status_code=status.HTTP_201_CREATED)
async def create_work(
    payload: WorkSessionPayload,
    manager: dict = Depends(require_manager),
    work_log: WorkLog = Depends(get_work_log)
):
    """Record a work session; rejects an exact duplicate of an existing one"""
    return await work_log.create_work(payload)


@router.put("/{work_id}", response_model=WorkSessionResponse)
async def update_work(
    work_id: int,
    payload: WorkSessionPayload,
    manager: dict = Depends(require_manager),
    work_log: WorkLog = Depends(get_work_log)
):
    return await work_log.update_work(work_id, payload)


@router.delete("/{work_id}", response_model=SuccessResponse)
async def delete_work(
    work_id: int,
    manager: dict = Depends(require_manager),
    work_log: WorkLog = Depends(get_work_log)
):
    await work_log.delete_work(work_id)
    return SuccessResponse()
