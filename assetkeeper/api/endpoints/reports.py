"""
Reporting endpoints
"""

from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from assetkeeper.core.database import get_db
from assetkeeper.crud import reports as crud
from assetkeeper.schemas.asset import AssetResponse
from assetkeeper.schemas.report import ReportFilter, ComplaintReport, MaintenanceReport

router = APIRouter()


@router.get("/assets", response_model=List[AssetResponse])
async def asset_report(filters: ReportFilter = Depends(), db: AsyncSession = Depends(get_db)):
    """Assets matching the filter, oldest first, archived ones included"""
    return await crud.get_asset_report_data(db, filters)


@router.get("/complaints", response_model=ComplaintReport)
async def complaint_report(filters: ReportFilter = Depends(), db: AsyncSession = Depends(get_db)):
    """Complaints raised in a period"""
    return await crud.get_complaint_report_data(db, filters)


@router.get("/maintenance", response_model=MaintenanceReport)
async def maintenance_report(filters: ReportFilter = Depends(), db: AsyncSession = Depends(get_db)):
    """Scheduled versus completed maintenance in a period"""
    return await crud.get_maintenance_report_data(db, filters)
