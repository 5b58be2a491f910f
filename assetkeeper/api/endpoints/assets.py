"""
Asset management endpoints
"""

from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from assetkeeper.core.database import get_db
from assetkeeper.crud import assets as crud
from assetkeeper.crud.asset_history import get_asset_history
from assetkeeper.schemas.asset import (
    AssetCreate,
    AssetUpdate,
    AssetFilter,
    AssetResponse,
    AssetListResponse
)
from assetkeeper.schemas.common import MessageResponse
from assetkeeper.schemas.history import AssetHistoryResponse

router = APIRouter()


@router.get("", response_model=AssetListResponse)
async def list_assets(
    filters: AssetFilter = Depends(),
    db: AsyncSession = Depends(get_db)
):
    """Get assets with filtering and pagination"""
    return await crud.get_assets(db, filters)


@router.get("/archived", response_model=List[AssetResponse])
async def list_archived_assets(db: AsyncSession = Depends(get_db)):
    """Get archived assets, most recently archived first"""
    return await crud.get_archived_assets(db)


@router.get("/{asset_id}", response_model=AssetResponse)
async def get_asset(asset_id: UUID, db: AsyncSession = Depends(get_db)):
    """Get a specific asset by ID"""
    asset = await crud.get_asset_by_id(db, asset_id)
    if not asset:
        raise HTTPException(status_code=404, detail="Asset not found")
    return asset


@router.post("", response_model=AssetResponse, status_code=201)
async def create_asset(asset_data: AssetCreate, db: AsyncSession = Depends(get_db)):
    """Create a new asset"""
    return await crud.create_asset(db, asset_data)


@router.put("/{asset_id}", response_model=AssetResponse)
async def update_asset(
    asset_id: UUID,
    asset_data: AssetUpdate,
    changed_by: Optional[UUID] = None,
    db: AsyncSession = Depends(get_db)
):
    """Update an asset; condition changes are recorded in its history"""
    return await crud.update_asset(db, asset_id, asset_data, changed_by=changed_by)


@router.delete("/{asset_id}", response_model=MessageResponse)
async def archive_asset(
    asset_id: UUID,
    changed_by: Optional[UUID] = None,
    db: AsyncSession = Depends(get_db)
):
    """Archive (soft delete) an asset"""
    await crud.delete_asset(db, asset_id, changed_by=changed_by)
    return MessageResponse(message="Asset archived successfully")


@router.post("/{asset_id}/restore", response_model=AssetResponse)
async def restore_asset(
    asset_id: UUID,
    changed_by: Optional[UUID] = None,
    db: AsyncSession = Depends(get_db)
):
    """Restore an archived asset"""
    return await crud.restore_asset(db, asset_id, changed_by=changed_by)


@router.delete("/{asset_id}/permanent", response_model=MessageResponse)
async def permanently_delete_asset(asset_id: UUID, db: AsyncSession = Depends(get_db)):
    """Remove an archived asset together with its complaints, maintenance and history"""
    await crud.permanent_delete_asset(db, asset_id)
    return MessageResponse(message="Asset permanently deleted")


@router.get("/{asset_id}/history", response_model=List[AssetHistoryResponse])
async def asset_history(asset_id: UUID, db: AsyncSession = Depends(get_db)):
    """Get the audit trail of an asset, newest first"""
    return await get_asset_history(db, asset_id)
