"""
Asset schemas for validation
"""

from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict
from uuid import UUID

from assetkeeper.models.asset import AssetCategory, AssetCondition
from assetkeeper.schemas.common import Pagination, PaginationParams


class AssetBase(BaseModel):
    """Base asset schema"""
    model_config = ConfigDict(use_enum_values=True)

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    category: AssetCategory
    condition: AssetCondition = AssetCondition.NEW
    owner: str = Field(..., min_length=1, max_length=255)
    photo_url: Optional[str] = None


class AssetCreate(AssetBase):
    """Asset creation schema"""
    pass


class AssetUpdate(BaseModel):
    """Asset update schema (all fields optional)"""
    model_config = ConfigDict(use_enum_values=True)

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    category: Optional[AssetCategory] = None
    condition: Optional[AssetCondition] = None
    owner: Optional[str] = Field(None, min_length=1, max_length=255)
    photo_url: Optional[str] = None


class AssetFilter(PaginationParams):
    """Listing filters; archived assets are hidden unless asked for"""
    model_config = ConfigDict(use_enum_values=True)

    search: Optional[str] = None
    category: Optional[AssetCategory] = None
    condition: Optional[AssetCondition] = None
    owner: Optional[str] = None
    is_archived: bool = False


class AssetResponse(BaseModel):
    """Asset response schema"""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: Optional[str] = None
    category: AssetCategory
    condition: AssetCondition
    owner: str
    photo_url: Optional[str] = None
    qr_code: str
    is_archived: bool
    created_at: datetime
    updated_at: datetime


class AssetListResponse(BaseModel):
    """One page of assets"""
    assets: List[AssetResponse]
    pagination: Pagination
