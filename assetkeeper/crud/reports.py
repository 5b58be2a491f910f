"""
Report data

Reports return structured data; rendering them to files is left to clients.
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from assetkeeper.models.asset import Asset
from assetkeeper.models.complaint import Complaint, ComplaintStatus
from assetkeeper.models.maintenance import MaintenanceSchedule
from assetkeeper.schemas.complaint import ComplaintResponse
from assetkeeper.schemas.maintenance import MaintenanceScheduleResponse
from assetkeeper.schemas.report import ReportFilter, ComplaintReport, MaintenanceReport

logger = logging.getLogger(__name__)


def _asset_conditions(filters: ReportFilter) -> list:
    conditions = []
    if filters.category:
        conditions.append(Asset.category == filters.category)
    if filters.condition:
        conditions.append(Asset.condition == filters.condition)
    if filters.owner:
        conditions.append(Asset.owner.ilike(f"%{filters.owner}%"))
    return conditions


def _date_conditions(column, filters: ReportFilter) -> list:
    conditions = []
    if filters.start_date:
        conditions.append(column >= filters.start_date)
    if filters.end_date:
        conditions.append(column <= filters.end_date)
    return conditions


async def get_asset_report_data(db: AsyncSession, filters: ReportFilter) -> List[Asset]:
    """Assets matching the filter, oldest first, archived ones included"""
    conditions = _date_conditions(Asset.created_at, filters) + _asset_conditions(filters)
    result = await db.execute(
        select(Asset).where(*conditions).order_by(Asset.created_at.asc())
    )
    assets = list(result.scalars().all())
    logger.info(f"Asset report built with {len(assets)} rows")
    return assets


async def get_complaint_report_data(db: AsyncSession, filters: ReportFilter) -> ComplaintReport:
    """Complaints created in the period, for assets matching the asset filters"""
    conditions = _date_conditions(Complaint.created_at, filters) + _asset_conditions(filters)
    result = await db.execute(
        select(Complaint)
        .join(Asset, Asset.id == Complaint.asset_id)
        .where(*conditions)
        .order_by(Complaint.created_at.asc())
    )
    complaints = list(result.scalars().all())

    by_status = {status.value: 0 for status in ComplaintStatus}
    for complaint in complaints:
        by_status[complaint.status] = by_status.get(complaint.status, 0) + 1

    return ComplaintReport(
        total=len(complaints),
        by_status=by_status,
        complaints=[ComplaintResponse.model_validate(c) for c in complaints],
    )


async def get_maintenance_report_data(db: AsyncSession, filters: ReportFilter) -> MaintenanceReport:
    """Maintenance scheduled in the period, split into completed and pending"""
    conditions = (
        _date_conditions(MaintenanceSchedule.scheduled_date, filters)
        + _asset_conditions(filters)
    )
    result = await db.execute(
        select(MaintenanceSchedule)
        .join(Asset, Asset.id == MaintenanceSchedule.asset_id)
        .where(*conditions)
        .order_by(MaintenanceSchedule.scheduled_date.asc())
    )
    schedules = list(result.scalars().all())
    completed = sum(1 for s in schedules if s.is_completed)

    return MaintenanceReport(
        total=len(schedules),
        completed=completed,
        pending=len(schedules) - completed,
        schedules=[MaintenanceScheduleResponse.model_validate(s) for s in schedules],
    )
