"""
User activity log endpoints
"""

from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from assetkeeper.core.database import get_db
from assetkeeper.crud import activity_logs as crud
from assetkeeper.schemas.user import UserActivityLogCreate, UserActivityLogResponse

router = APIRouter()


@router.get("", response_model=List[UserActivityLogResponse])
async def list_activity(user_id: Optional[UUID] = None, db: AsyncSession = Depends(get_db)):
    return await crud.get_user_activity_logs(db, user_id)


@router.get("/recent", response_model=List[UserActivityLogResponse])
async def recent_activity(
    limit: int = Query(default=50, ge=1, le=500),
    db: AsyncSession = Depends(get_db)
):
    return await crud.get_recent_activity(db, limit)


@router.get("/resource/{resource_type}/{resource_id}", response_model=List[UserActivityLogResponse])
async def resource_activity(resource_type: str, resource_id: UUID, db: AsyncSession = Depends(get_db)):
    """Activity touching one resource"""
    return await crud.get_activity_logs_by_resource(db, resource_type, resource_id)


@router.post("", response_model=UserActivityLogResponse, status_code=201)
async def record_activity(data: UserActivityLogCreate, db: AsyncSession = Depends(get_db)):
    return await crud.create_user_activity_log(db, data)
