"""
Maintenance schedule schemas
"""

from typing import Optional, Literal
from datetime import datetime
from uuid import UUID
from pydantic import BaseModel, Field, ConfigDict, field_validator

from assetkeeper.schemas.common import to_naive_utc


class MaintenanceScheduleCreate(BaseModel):
    """New maintenance schedule"""
    asset_id: UUID
    scheduled_by: UUID
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    scheduled_date: datetime

    normalize_dates = field_validator("scheduled_date")(to_naive_utc)


class MaintenanceScheduleUpdate(BaseModel):
    """Maintenance schedule update (all fields optional)"""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    scheduled_date: Optional[datetime] = None
    is_completed: Optional[bool] = None
    completed_at: Optional[datetime] = None

    normalize_dates = field_validator("scheduled_date", "completed_at")(to_naive_utc)


class MaintenanceScheduleResponse(BaseModel):
    """Maintenance schedule response schema"""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    asset_id: UUID
    scheduled_by: UUID
    title: str
    description: Optional[str] = None
    scheduled_date: datetime
    is_completed: bool
    completed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class CalendarEvent(BaseModel):
    """Maintenance entry formatted for the calendar view"""
    id: UUID
    title: str
    description: Optional[str] = None
    date: datetime
    type: Literal["maintenance", "inspection"] = "maintenance"
    asset_name: str
