"""
Complaint schemas
"""

from typing import Optional
from datetime import datetime
from uuid import UUID
from pydantic import BaseModel, Field, ConfigDict

from assetkeeper.models.complaint import ComplaintStatus


class ComplaintCreate(BaseModel):
    """Complaint submitted against an asset"""
    model_config = ConfigDict(use_enum_values=True)

    asset_id: UUID
    sender_name: str = Field(..., min_length=1, max_length=255)
    status: ComplaintStatus = ComplaintStatus.NEEDS_REPAIR
    description: str = Field(..., min_length=1)


class PublicComplaintCreate(BaseModel):
    """Complaint submitted from a scanned QR label"""
    qr_code: str = Field(..., min_length=1)
    sender_name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)


class ComplaintUpdate(BaseModel):
    """Status change by staff"""
    model_config = ConfigDict(use_enum_values=True)

    status: ComplaintStatus
    resolved_by: Optional[UUID] = None


class ComplaintResponse(BaseModel):
    """Complaint response schema"""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    asset_id: UUID
    sender_name: str
    status: ComplaintStatus
    description: str
    resolved_by: Optional[UUID] = None
    created_at: datetime
    updated_at: datetime
