"""
Scheduled maintenance work
"""

from sqlalchemy import Column, String, Text, Boolean, DateTime, ForeignKey, Index, Uuid
from assetkeeper.models.base import BaseModel


class MaintenanceSchedule(BaseModel):
    """Planned (and eventually completed) maintenance for an asset"""

    __tablename__ = "maintenance_schedules"

    asset_id = Column(Uuid(as_uuid=True), ForeignKey("assets.id"), nullable=False)
    scheduled_by = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    scheduled_date = Column(DateTime, nullable=False)

    is_completed = Column(Boolean, nullable=False, default=False)
    completed_at = Column(DateTime, nullable=True)

    __table_args__ = (
        Index("idx_maintenance_asset_date", "asset_id", "scheduled_date"),
    )
