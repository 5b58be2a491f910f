"""
Asset history schemas
"""

from typing import Optional
from datetime import datetime
from uuid import UUID
from pydantic import BaseModel, Field, ConfigDict


class AssetHistoryCreate(BaseModel):
    """Audit row to append"""
    asset_id: UUID
    changed_by: Optional[UUID] = None
    change_type: str = Field(..., min_length=1, max_length=100)
    old_value: Optional[str] = None
    new_value: Optional[str] = None
    description: Optional[str] = None


class AssetHistoryResponse(BaseModel):
    """Stored audit row"""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    asset_id: UUID
    changed_by: Optional[UUID] = None
    change_type: str
    old_value: Optional[str] = None
    new_value: Optional[str] = None
    description: Optional[str] = None
    created_at: datetime
