"""
Dashboard aggregates
"""

import logging
from collections import Counter
from datetime import datetime, timedelta
from typing import Dict

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from assetkeeper.models.asset import Asset, AssetCategory, AssetCondition
from assetkeeper.models.complaint import Complaint, ComplaintStatus
from assetkeeper.models.maintenance import MaintenanceSchedule
from assetkeeper.schemas.report import DashboardStats, MaintenanceStatistics

logger = logging.getLogger(__name__)


async def _count_active_by(db: AsyncSession, column) -> Dict[str, int]:
    result = await db.execute(
        select(column, func.count(Asset.id))
        .where(Asset.is_archived.is_(False))
        .group_by(column)
    )
    return {key: count for key, count in result.all()}


async def get_assets_by_condition(db: AsyncSession) -> Dict[str, int]:
    """Active assets per condition; conditions with no assets are omitted"""
    return await _count_active_by(db, Asset.condition)


async def get_assets_by_category(db: AsyncSession) -> Dict[str, int]:
    """Active assets per category; categories with no assets are omitted"""
    return await _count_active_by(db, Asset.category)


async def get_dashboard_stats(db: AsyncSession) -> DashboardStats:
    """Headline numbers, with every condition and category present"""
    total_result = await db.execute(
        select(func.count(Asset.id)).where(Asset.is_archived.is_(False))
    )
    total_assets = total_result.scalar() or 0

    by_condition = await get_assets_by_condition(db)
    by_category = await get_assets_by_category(db)

    pending_result = await db.execute(
        select(func.count(Complaint.id)).where(
            Complaint.status == ComplaintStatus.NEEDS_REPAIR.value
        )
    )

    now = datetime.utcnow()
    upcoming_result = await db.execute(
        select(func.count(MaintenanceSchedule.id)).where(
            MaintenanceSchedule.is_completed.is_(False),
            MaintenanceSchedule.scheduled_date >= now,
            MaintenanceSchedule.scheduled_date <= now + timedelta(days=7),
        )
    )

    return DashboardStats(
        total_assets=total_assets,
        assets_by_condition={c.value: by_condition.get(c.value, 0) for c in AssetCondition},
        assets_by_category={c.value: by_category.get(c.value, 0) for c in AssetCategory},
        pending_complaints=pending_result.scalar() or 0,
        upcoming_maintenance=upcoming_result.scalar() or 0,
    )


async def get_complaint_statistics(db: AsyncSession) -> Dict[str, int]:
    """Complaints per status, archived assets included"""
    result = await db.execute(
        select(Complaint.status, func.count(Complaint.id)).group_by(Complaint.status)
    )
    return {status: count for status, count in result.all()}


async def get_maintenance_statistics(db: AsyncSession) -> MaintenanceStatistics:
    async def _count(*conditions) -> int:
        result = await db.execute(select(func.count(MaintenanceSchedule.id)).where(*conditions))
        return result.scalar() or 0

    return MaintenanceStatistics(
        completed=await _count(MaintenanceSchedule.is_completed.is_(True)),
        pending=await _count(MaintenanceSchedule.is_completed.is_(False)),
        overdue=await _count(
            MaintenanceSchedule.is_completed.is_(False),
            MaintenanceSchedule.scheduled_date <= datetime.utcnow(),
        ),
    )


async def get_monthly_asset_trends(db: AsyncSession) -> Dict[str, int]:
    """Active assets created in the last 12 months, keyed ``YYYY-MM``"""
    since = datetime.utcnow() - timedelta(days=365)
    result = await db.execute(
        select(Asset.created_at).where(
            Asset.is_archived.is_(False),
            Asset.created_at >= since,
        )
    )
    # Bucketed here so the query stays the same on every backend
    months = Counter(created_at.strftime("%Y-%m") for created_at in result.scalars().all())
    return dict(sorted(months.items()))
