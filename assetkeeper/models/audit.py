"""
Audit trail models: per-asset change history and per-user activity
"""

from sqlalchemy import Column, String, Text, ForeignKey, Index, Uuid
from assetkeeper.models.base import AppendOnlyModel


class ChangeType:
    """Well-known asset history tags (the column accepts any string)"""
    STATUS_CHANGE = "status_change"
    MAINTENANCE = "maintenance"
    ARCHIVED = "archived"
    RESTORED = "restored"
    COMPLAINT_RESOLVED = "complaint_resolved"


class AssetHistory(AppendOnlyModel):
    """What changed on an asset, from what, to what, and by whom"""

    __tablename__ = "asset_history"

    asset_id = Column(Uuid(as_uuid=True), ForeignKey("assets.id"), nullable=False)

    # Null means the change was made by the system
    changed_by = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=True)

    change_type = Column(String(100), nullable=False)
    old_value = Column(Text, nullable=True)
    new_value = Column(Text, nullable=True)
    description = Column(Text, nullable=True)

    __table_args__ = (
        Index("idx_asset_history_asset_created", "asset_id", "created_at"),
    )


class UserActivityLog(AppendOnlyModel):
    """Actions performed by users across resources"""

    __tablename__ = "user_activity_logs"

    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False)
    action = Column(String(100), nullable=False)
    resource_type = Column(String(100), nullable=False)  # asset, complaint, user, etc.
    resource_id = Column(Uuid(as_uuid=True), nullable=True)
    description = Column(Text, nullable=True)

    __table_args__ = (
        Index("idx_activity_resource", "resource_type", "resource_id"),
    )
