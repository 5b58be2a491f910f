"""
User management endpoints
"""

from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from assetkeeper.core.database import get_db
from assetkeeper.crud import users as crud
from assetkeeper.schemas.common import MessageResponse
from assetkeeper.schemas.user import UserCreate, UserUpdate, UserResponse

router = APIRouter()


@router.get("", response_model=List[UserResponse])
async def list_users(db: AsyncSession = Depends(get_db)):
    return await crud.get_users(db)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: UUID, db: AsyncSession = Depends(get_db)):
    user = await crud.get_user_by_id(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.post("", response_model=UserResponse, status_code=201)
async def create_user(data: UserCreate, db: AsyncSession = Depends(get_db)):
    """Create a user; duplicate emails are rejected by the store"""
    return await crud.create_user(db, data)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(user_id: UUID, data: UserUpdate, db: AsyncSession = Depends(get_db)):
    return await crud.update_user(db, user_id, data)


@router.delete("/{user_id}", response_model=MessageResponse)
async def deactivate_user(user_id: UUID, db: AsyncSession = Depends(get_db)):
    """Deactivate a user"""
    if not await crud.delete_user(db, user_id):
        raise HTTPException(status_code=404, detail="User not found")
    return MessageResponse(message="User deactivated")
