"""
User handlers

Every function returns ``UserResponse`` objects whose password is blank, never
the ORM rows themselves.
"""

import logging
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from assetkeeper.core.errors import NotFoundError
from assetkeeper.models.user import User
from assetkeeper.schemas.user import UserCreate, UserUpdate, UserResponse

logger = logging.getLogger(__name__)


def to_public(user: User) -> UserResponse:
    """Strip the password hash before a user leaves the store layer"""
    return UserResponse.model_validate(user).model_copy(update={"password": ""})


async def create_user(db: AsyncSession, data: UserCreate) -> UserResponse:
    try:
        user = User(email=data.email, name=data.name, role=data.role)
        user.set_password(data.password)
        db.add(user)
        await db.commit()
    except Exception as e:
        await db.rollback()
        logger.error(f"User creation failed: {e}")
        raise
    return to_public(user)


async def get_users(db: AsyncSession) -> List[UserResponse]:
    """All users, inactive ones included"""
    result = await db.execute(select(User).order_by(User.created_at.asc()))
    return [to_public(user) for user in result.scalars().all()]


async def get_user_by_id(db: AsyncSession, user_id: UUID) -> Optional[UserResponse]:
    user = await db.get(User, user_id)
    return to_public(user) if user else None


async def update_user(db: AsyncSession, user_id: UUID, data: UserUpdate) -> UserResponse:
    try:
        user = await db.get(User, user_id)
        if user is None:
            raise NotFoundError("User", user_id)

        update_data = data.model_dump(exclude_unset=True, exclude_none=True)
        password = update_data.pop("password", None)
        for field, value in update_data.items():
            setattr(user, field, value)
        if password is not None:
            user.set_password(password)
        user.updated_at = datetime.utcnow()

        await db.commit()
    except Exception as e:
        await db.rollback()
        logger.error(f"User update failed: {e}")
        raise
    return to_public(user)


async def delete_user(db: AsyncSession, user_id: UUID) -> bool:
    """Soft delete; False when the user does not exist"""
    user = await db.get(User, user_id)
    if user is None:
        return False
    try:
        user.is_active = False
        user.updated_at = datetime.utcnow()
        await db.commit()
    except Exception as e:
        await db.rollback()
        logger.error(f"User deletion failed: {e}")
        raise
    return True
