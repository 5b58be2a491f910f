"""
Complaint endpoints
"""

from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from assetkeeper.core.database import get_db
from assetkeeper.crud import complaints as crud
from assetkeeper.schemas.complaint import ComplaintCreate, ComplaintUpdate, ComplaintResponse

router = APIRouter()


@router.get("", response_model=List[ComplaintResponse])
async def list_complaints(asset_id: Optional[UUID] = None, db: AsyncSession = Depends(get_db)):
    """Get complaints, newest first, optionally for one asset"""
    if asset_id is not None:
        return await crud.get_complaints_by_asset_id(db, asset_id)
    return await crud.get_complaints(db)


@router.get("/pending", response_model=List[ComplaintResponse])
async def list_pending_complaints(db: AsyncSession = Depends(get_db)):
    """Complaints that still need repair or are urgent"""
    return await crud.get_pending_complaints(db)


@router.get("/{complaint_id}", response_model=ComplaintResponse)
async def get_complaint(complaint_id: UUID, db: AsyncSession = Depends(get_db)):
    complaint = await crud.get_complaint_by_id(db, complaint_id)
    if not complaint:
        raise HTTPException(status_code=404, detail="Complaint not found")
    return complaint


@router.post("", response_model=ComplaintResponse, status_code=201)
async def create_complaint(data: ComplaintCreate, db: AsyncSession = Depends(get_db)):
    """File a complaint against an active asset"""
    return await crud.create_complaint(db, data)


@router.put("/{complaint_id}", response_model=ComplaintResponse)
async def update_complaint(
    complaint_id: UUID,
    data: ComplaintUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Change complaint status"""
    return await crud.update_complaint(db, complaint_id, data)
