"""
User activity log handlers
"""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from assetkeeper.core.errors import NotFoundError
from assetkeeper.models.audit import UserActivityLog
from assetkeeper.models.user import User
from assetkeeper.schemas.user import UserActivityLogCreate

logger = logging.getLogger(__name__)


async def create_user_activity_log(db: AsyncSession, data: UserActivityLogCreate) -> UserActivityLog:
    if await db.get(User, data.user_id) is None:
        raise NotFoundError("User", data.user_id)

    try:
        entry = UserActivityLog(**data.model_dump())
        db.add(entry)
        await db.commit()
    except Exception as e:
        await db.rollback()
        logger.error(f"User activity log creation failed: {e}")
        raise
    return entry


async def get_user_activity_logs(db: AsyncSession, user_id: Optional[UUID] = None) -> List[UserActivityLog]:
    """Activity, newest first, optionally for one user"""
    query = select(UserActivityLog).order_by(UserActivityLog.created_at.desc())
    if user_id is not None:
        query = query.where(UserActivityLog.user_id == user_id)
    result = await db.execute(query)
    return list(result.scalars().all())


async def get_recent_activity(db: AsyncSession, limit: int = 50) -> List[UserActivityLog]:
    result = await db.execute(
        select(UserActivityLog).order_by(UserActivityLog.created_at.desc()).limit(limit)
    )
    return list(result.scalars().all())


async def log_user_action(
    db: AsyncSession,
    user_id: UUID,
    action: str,
    resource_type: str,
    resource_id: Optional[UUID] = None,
    description: Optional[str] = None,
) -> UserActivityLog:
    return await create_user_activity_log(
        db,
        UserActivityLogCreate(
            user_id=user_id,
            action=action,
            resource_type=resource_type,
            resource_id=resource_id,
            description=description,
        ),
    )


async def get_activity_logs_by_resource(
    db: AsyncSession,
    resource_type: str,
    resource_id: UUID,
) -> List[UserActivityLog]:
    result = await db.execute(
        select(UserActivityLog)
        .where(
            UserActivityLog.resource_type == resource_type,
            UserActivityLog.resource_id == resource_id,
        )
        .order_by(UserActivityLog.created_at.desc())
    )
    return list(result.scalars().all())
