"""
Login endpoints
"""

from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from assetkeeper.core.database import get_db
from assetkeeper.crud import auth as crud
from assetkeeper.schemas.user import LoginRequest, UserResponse

router = APIRouter()


@router.post("/login", response_model=UserResponse)
async def login(credentials: LoginRequest, db: AsyncSession = Depends(get_db)):
    """Check credentials and return the user"""
    return await crud.login(db, credentials.email, credentials.password)


@router.get("/me/{user_id}", response_model=UserResponse)
async def current_user(user_id: UUID, db: AsyncSession = Depends(get_db)):
    user = await crud.get_current_user(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found or inactive")
    return user
