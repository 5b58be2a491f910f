"""
Credential check for staff login
"""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from assetkeeper.core.errors import InvalidCredentialsError
from assetkeeper.crud.users import to_public
from assetkeeper.models.user import User
from assetkeeper.schemas.user import UserResponse

logger = logging.getLogger(__name__)


async def login(db: AsyncSession, email: str, password: str) -> UserResponse:
    """Return the active user matching the credentials"""
    result = await db.execute(
        select(User).where(User.email == email, User.is_active.is_(True))
    )
    user = result.scalar_one_or_none()
    if user is None or not password or not user.verify_password(password):
        logger.warning(f"Rejected login for {email}")
        raise InvalidCredentialsError()
    return to_public(user)


async def get_current_user(db: AsyncSession, user_id: UUID) -> Optional[UserResponse]:
    """Active user by id, or None"""
    user = await db.get(User, user_id)
    if user is None or not user.is_active:
        return None
    return to_public(user)
