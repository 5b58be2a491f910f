"""
Complaints raised against assets
"""

from enum import Enum
from sqlalchemy import Column, String, Text, ForeignKey, CheckConstraint, Index, Uuid
from assetkeeper.models.base import BaseModel, enum_check


class ComplaintStatus(str, Enum):
    """Complaint progress"""
    NEEDS_REPAIR = "needs-repair"
    URGENT = "urgent"
    IN_REPAIR = "in-repair"
    REPAIRED = "repaired"


# Statuses that still need someone to act
PENDING_STATUSES = (ComplaintStatus.NEEDS_REPAIR.value, ComplaintStatus.URGENT.value)


class Complaint(BaseModel):
    """A malfunction report, usually submitted by scanning the asset's QR label"""

    __tablename__ = "complaints"

    asset_id = Column(Uuid(as_uuid=True), ForeignKey("assets.id"), nullable=False)
    sender_name = Column(String(255), nullable=False)
    status = Column(String(50), nullable=False, default=ComplaintStatus.NEEDS_REPAIR.value)
    description = Column(Text, nullable=False)

    # Set only when a staff member resolves the complaint
    resolved_by = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=True)

    __table_args__ = (
        CheckConstraint(enum_check("status", ComplaintStatus), name="ck_complaint_status"),
        Index("idx_complaints_asset", "asset_id"),
    )
