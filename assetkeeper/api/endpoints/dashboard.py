"""
Dashboard endpoints
"""

from typing import Dict
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from assetkeeper.core.database import get_db
from assetkeeper.crud import dashboard as crud
from assetkeeper.schemas.report import DashboardStats, MaintenanceStatistics

router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
async def dashboard_stats(db: AsyncSession = Depends(get_db)):
    """Headline numbers for the dashboard"""
    return await crud.get_dashboard_stats(db)


@router.get("/assets/by-condition", response_model=Dict[str, int])
async def assets_by_condition(db: AsyncSession = Depends(get_db)):
    return await crud.get_assets_by_condition(db)


@router.get("/assets/by-category", response_model=Dict[str, int])
async def assets_by_category(db: AsyncSession = Depends(get_db)):
    return await crud.get_assets_by_category(db)


@router.get("/assets/monthly", response_model=Dict[str, int])
async def monthly_asset_trends(db: AsyncSession = Depends(get_db)):
    return await crud.get_monthly_asset_trends(db)


@router.get("/complaints", response_model=Dict[str, int])
async def complaint_statistics(db: AsyncSession = Depends(get_db)):
    return await crud.get_complaint_statistics(db)


@router.get("/maintenance", response_model=MaintenanceStatistics)
async def maintenance_statistics(db: AsyncSession = Depends(get_db)):
    return await crud.get_maintenance_statistics(db)
