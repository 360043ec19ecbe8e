from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, and_
from typing import List
from app.models.driver import Driver
from app.models.work import WorkSession
from app.schemas.work import WorkSessionPayload, WorkSessionFilters, WorkSessionListItem
from app.core.derivations import compute_total_hours, compute_total_km
from app.core.errors import NotFound, ValidationError, DuplicateEntry
import logging

logger = logging.getLogger(__name__)

# Columns that identify a work session for the duplicate guard
IDENTITY_FIELDS = (
    "driver_id",
    "date",
    "machine",
    "start_time",
    "end_time",
    "odometer_start",
    "odometer_end",
)


class WorkLog:
    """Work sessions per driver with derived hours and distance"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_works(self, filters: WorkSessionFilters) -> List[WorkSessionListItem]:
        """
        Sessions joined with their driver's name.
        Filters are ANDed; the date range is inclusive at both ends
        """
        conditions = []
        if filters.driver_id is not None:
            conditions.append(WorkSession.driver_id == filters.driver_id)
        if filters.machine:
            conditions.append(WorkSession.machine == filters.machine)
        if filters.date_from:
            conditions.append(WorkSession.date >= filters.date_from)
        if filters.date_to:
            conditions.append(WorkSession.date <= filters.date_to)

        query = (
            select(WorkSession, Driver.name.label("driver_name"))
            .join(Driver, WorkSession.driver_id == Driver.id)
        )
        if conditions:
            query = query.where(and_(*conditions))
        query = query.order_by(WorkSession.date.desc(), WorkSession.id.desc())

        result = await self.db.execute(query)
        return [
            WorkSessionListItem.model_validate(
                {**_as_dict(work), "driver_name": driver_name}
            )
            for work, driver_name in result.all()
        ]

    async def get_work(self, work_id: int) -> WorkSession:
        result = await self.db.execute(select(WorkSession).where(WorkSession.id == work_id))
        work = result.scalar_one_or_none()
        if not work:
            raise NotFound()
        return work

    async def find_duplicate(self, payload: WorkSessionPayload) -> bool:
        """
        Look for a stored session with the same identity fields.
        Read-then-write: two concurrent identical creates can both pass
        """
        conditions = []
        for field in IDENTITY_FIELDS:
            column = getattr(WorkSession, field)
            value = getattr(payload, field)
            conditions.append(column.is_(None) if value is None else column == value)

        result = await self.db.execute(select(WorkSession.id).where(and_(*conditions)).limit(1))
        return result.first() is not None

    async def create_work(self, payload: WorkSessionPayload) -> WorkSession:
        _require_identity(payload)

        if await self.find_duplicate(payload):
            logger.info(f"Rejected duplicate work session for driver {payload.driver_id} on {payload.date}")
            raise DuplicateEntry()

        work = WorkSession(**_row_values(payload))
        self.db.add(work)
        await self.db.commit()
        await self.db.refresh(work)
        return work

    async def update_work(self, work_id: int, payload: WorkSessionPayload) -> WorkSession:
        """Full replace: omitted optional fields are cleared and derived fields recomputed"""
        work = await self.get_work(work_id)
        _require_identity(payload)

        for field, value in _row_values(payload).items():
            setattr(work, field, value)

        await self.db.commit()
        await self.db.refresh(work)
        return work

    async def delete_work(self, work_id: int) -> None:
        result = await self.db.execute(delete(WorkSession).where(WorkSession.id == work_id))
        if result.rowcount == 0:
            raise NotFound()
        await self.db.commit()


def _require_identity(payload: WorkSessionPayload) -> None:
    if payload.driver_id is None or payload.date is None:
        raise ValidationError("driver_id & date required")


def _row_values(payload: WorkSessionPayload) -> dict:
    values = payload.model_dump()
    values["total_hours"] = compute_total_hours(payload.start_time, payload.end_time)
    values["total_km"] = compute_total_km(payload.odometer_start, payload.odometer_end)
    return values


def _as_dict(work: WorkSession) -> dict:
    return {column.name: getattr(work, column.name) for column in WorkSession.__table__.columns}
