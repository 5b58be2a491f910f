"""
Asset history endpoints
"""

from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from assetkeeper.core.database import get_db
from assetkeeper.crud import asset_history as crud
from assetkeeper.schemas.history import AssetHistoryCreate, AssetHistoryResponse

router = APIRouter()


@router.post("", response_model=AssetHistoryResponse, status_code=201)
async def create_history_entry(data: AssetHistoryCreate, db: AsyncSession = Depends(get_db)):
    """Append a history row by hand"""
    return await crud.create_asset_history(db, data)


@router.get("/{history_id}", response_model=AssetHistoryResponse)
async def get_history_entry(history_id: UUID, db: AsyncSession = Depends(get_db)):
    entry = await crud.get_asset_history_by_id(db, history_id)
    if not entry:
        raise HTTPException(status_code=404, detail="History entry not found")
    return entry
