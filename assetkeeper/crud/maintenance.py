"""
Maintenance schedule handlers
"""

import logging
from datetime import datetime, timedelta
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from assetkeeper.core.errors import NotFoundError
from assetkeeper.crud.asset_history import append_history
from assetkeeper.models.asset import Asset
from assetkeeper.models.audit import ChangeType
from assetkeeper.models.maintenance import MaintenanceSchedule
from assetkeeper.models.user import User
from assetkeeper.schemas.maintenance import (
    MaintenanceScheduleCreate,
    MaintenanceScheduleUpdate,
    CalendarEvent,
)

logger = logging.getLogger(__name__)

UPCOMING_WINDOW_DAYS = 30


async def create_maintenance_schedule(db: AsyncSession, data: MaintenanceScheduleCreate) -> MaintenanceSchedule:
    if await db.get(Asset, data.asset_id) is None:
        raise NotFoundError("Asset", data.asset_id)
    if await db.get(User, data.scheduled_by) is None:
        raise NotFoundError("User", data.scheduled_by)

    try:
        schedule = MaintenanceSchedule(**data.model_dump())
        schedule.is_completed = False
        db.add(schedule)
        await db.commit()
    except Exception as e:
        await db.rollback()
        logger.error(f"Maintenance schedule creation failed: {e}")
        raise
    return schedule


async def get_maintenance_schedules(db: AsyncSession) -> List[MaintenanceSchedule]:
    """All schedules in calendar order"""
    result = await db.execute(
        select(MaintenanceSchedule).order_by(MaintenanceSchedule.scheduled_date.asc())
    )
    return list(result.scalars().all())


async def get_maintenance_schedules_by_asset_id(db: AsyncSession, asset_id: UUID) -> List[MaintenanceSchedule]:
    result = await db.execute(
        select(MaintenanceSchedule)
        .where(MaintenanceSchedule.asset_id == asset_id)
        .order_by(MaintenanceSchedule.scheduled_date.asc())
    )
    return list(result.scalars().all())


async def get_upcoming_maintenance(db: AsyncSession) -> List[MaintenanceSchedule]:
    """Open schedules due within the next 30 days"""
    now = datetime.utcnow()
    result = await db.execute(
        select(MaintenanceSchedule)
        .where(
            MaintenanceSchedule.is_completed.is_(False),
            MaintenanceSchedule.scheduled_date >= now,
            MaintenanceSchedule.scheduled_date <= now + timedelta(days=UPCOMING_WINDOW_DAYS),
        )
        .order_by(MaintenanceSchedule.scheduled_date.asc())
    )
    return list(result.scalars().all())


async def update_maintenance_schedule(
    db: AsyncSession,
    schedule_id: UUID,
    data: MaintenanceScheduleUpdate,
) -> MaintenanceSchedule:
    """Edit a schedule

    ``completed_at`` is stamped once when the schedule flips to completed,
    unless the caller supplies it, and cleared when it is reopened.
    """
    try:
        schedule = await db.get(MaintenanceSchedule, schedule_id)
        if schedule is None:
            raise NotFoundError("Maintenance schedule", schedule_id)

        update_data = data.model_dump(exclude_unset=True)
        if "title" in update_data and update_data["title"] is None:
            del update_data["title"]
        if "scheduled_date" in update_data and update_data["scheduled_date"] is None:
            del update_data["scheduled_date"]

        was_completed = schedule.is_completed
        explicit_completed_at = "completed_at" in update_data
        is_completed = update_data.pop("is_completed", None)

        for field, value in update_data.items():
            setattr(schedule, field, value)

        if is_completed is not None:
            schedule.is_completed = is_completed
            if is_completed and not was_completed and not explicit_completed_at:
                schedule.completed_at = datetime.utcnow()
            elif not is_completed and not explicit_completed_at:
                schedule.completed_at = None

        schedule.updated_at = datetime.utcnow()
        await db.commit()
    except Exception as e:
        await db.rollback()
        logger.error(f"Maintenance schedule update failed: {e}")
        raise
    return schedule


async def mark_maintenance_completed(db: AsyncSession, schedule_id: UUID) -> MaintenanceSchedule:
    """Complete a schedule and note the work in the asset's history"""
    try:
        schedule = await db.get(MaintenanceSchedule, schedule_id)
        if schedule is None:
            raise NotFoundError("Maintenance schedule", schedule_id)

        now = datetime.utcnow()
        if not schedule.is_completed:
            schedule.is_completed = True
            schedule.completed_at = now
            await append_history(
                db,
                asset_id=schedule.asset_id,
                change_type=ChangeType.MAINTENANCE,
                changed_by=schedule.scheduled_by,
                description=f"Maintenance completed: {schedule.title}",
            )
        schedule.updated_at = now
        await db.commit()
    except Exception as e:
        await db.rollback()
        logger.error(f"Marking maintenance completed failed: {e}")
        raise
    return schedule


async def get_calendar_events(db: AsyncSession) -> List[CalendarEvent]:
    """Open schedules formatted for the calendar"""
    result = await db.execute(
        select(MaintenanceSchedule, Asset.name)
        .join(Asset, Asset.id == MaintenanceSchedule.asset_id)
        .where(MaintenanceSchedule.is_completed.is_(False))
        .order_by(MaintenanceSchedule.scheduled_date.asc())
    )
    return [
        CalendarEvent(
            id=schedule.id,
            title=schedule.title,
            description=schedule.description,
            date=schedule.scheduled_date,
            type="maintenance",
            asset_name=asset_name,
        )
        for schedule, asset_name in result.all()
    ]
