"""
Report and dashboard schemas
"""

from typing import Optional, Dict, List
from datetime import datetime
from pydantic import BaseModel, ConfigDict, field_validator

from assetkeeper.models.asset import AssetCategory, AssetCondition
from assetkeeper.schemas.common import to_naive_utc
from assetkeeper.schemas.complaint import ComplaintResponse
from assetkeeper.schemas.maintenance import MaintenanceScheduleResponse


class ReportFilter(BaseModel):
    """Report filters; every field is optional"""
    model_config = ConfigDict(use_enum_values=True)

    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    category: Optional[AssetCategory] = None
    condition: Optional[AssetCondition] = None
    owner: Optional[str] = None

    normalize_dates = field_validator("start_date", "end_date")(to_naive_utc)


class ComplaintReport(BaseModel):
    """Complaints raised in a period"""
    total: int
    by_status: Dict[str, int]
    complaints: List[ComplaintResponse]


class MaintenanceReport(BaseModel):
    """Scheduled versus completed maintenance in a period"""
    total: int
    completed: int
    pending: int
    schedules: List[MaintenanceScheduleResponse]


class DashboardStats(BaseModel):
    """Headline numbers for the dashboard"""
    total_assets: int
    assets_by_condition: Dict[str, int]
    assets_by_category: Dict[str, int]
    pending_complaints: int
    upcoming_maintenance: int


class MaintenanceStatistics(BaseModel):
    """Maintenance schedule counts"""
    completed: int
    pending: int
    overdue: int
