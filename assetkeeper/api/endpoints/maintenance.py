"""
Maintenance schedule endpoints
"""

from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from assetkeeper.core.database import get_db
from assetkeeper.crud import maintenance as crud
from assetkeeper.schemas.maintenance import (
    MaintenanceScheduleCreate,
    MaintenanceScheduleUpdate,
    MaintenanceScheduleResponse,
    CalendarEvent
)

router = APIRouter()


@router.get("", response_model=List[MaintenanceScheduleResponse])
async def list_schedules(asset_id: Optional[UUID] = None, db: AsyncSession = Depends(get_db)):
    """Get maintenance schedules ordered by date, optionally for one asset"""
    if asset_id is not None:
        return await crud.get_maintenance_schedules_by_asset_id(db, asset_id)
    return await crud.get_maintenance_schedules(db)


@router.get("/upcoming", response_model=List[MaintenanceScheduleResponse])
async def list_upcoming(db: AsyncSession = Depends(get_db)):
    """Open schedules due in the next 30 days"""
    return await crud.get_upcoming_maintenance(db)


@router.get("/calendar", response_model=List[CalendarEvent])
async def calendar(db: AsyncSession = Depends(get_db)):
    return await crud.get_calendar_events(db)


@router.post("", response_model=MaintenanceScheduleResponse, status_code=201)
async def create_schedule(data: MaintenanceScheduleCreate, db: AsyncSession = Depends(get_db)):
    return await crud.create_maintenance_schedule(db, data)


@router.put("/{schedule_id}", response_model=MaintenanceScheduleResponse)
async def update_schedule(
    schedule_id: UUID,
    data: MaintenanceScheduleUpdate,
    db: AsyncSession = Depends(get_db)
):
    return await crud.update_maintenance_schedule(db, schedule_id, data)


@router.post("/{schedule_id}/complete", response_model=MaintenanceScheduleResponse)
async def complete_schedule(schedule_id: UUID, db: AsyncSession = Depends(get_db)):
    """Mark a schedule done and record it in the asset history"""
    return await crud.mark_maintenance_completed(db, schedule_id)
