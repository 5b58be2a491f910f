"""
Asset history (audit trail) handlers

Rows are append-only. The only way they disappear is the cascade run by
permanent asset deletion.
"""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from assetkeeper.core.errors import NotFoundError
from assetkeeper.models.asset import Asset
from assetkeeper.models.audit import AssetHistory, ChangeType
from assetkeeper.models.user import User
from assetkeeper.schemas.history import AssetHistoryCreate

logger = logging.getLogger(__name__)


async def append_history(
    db: AsyncSession,
    asset_id: UUID,
    change_type: str,
    changed_by: Optional[UUID] = None,
    old_value: Optional[str] = None,
    new_value: Optional[str] = None,
    description: Optional[str] = None,
) -> AssetHistory:
    """Add a history row to the session without committing

    Lets lifecycle operations commit the asset change and its audit row in
    one transaction.
    """
    if await db.get(Asset, asset_id) is None:
        raise NotFoundError("Asset", asset_id)
    if changed_by is not None and await db.get(User, changed_by) is None:
        raise NotFoundError("User", changed_by)

    entry = AssetHistory(
        asset_id=asset_id,
        changed_by=changed_by,
        change_type=change_type,
        old_value=old_value,
        new_value=new_value,
        description=description,
    )
    db.add(entry)
    await db.flush()
    logger.info(f"History '{change_type}' recorded for asset {asset_id}")
    return entry


async def _append_and_commit(db: AsyncSession, **values) -> AssetHistory:
    try:
        entry = await append_history(db, **values)
        await db.commit()
    except Exception as e:
        await db.rollback()
        logger.error(f"Asset history creation failed: {e}")
        raise
    return entry


async def create_asset_history(db: AsyncSession, data: AssetHistoryCreate) -> AssetHistory:
    """Append an audit row; the asset (and the user, when given) must exist"""
    return await _append_and_commit(db, **data.model_dump())


async def get_asset_history(db: AsyncSession, asset_id: UUID) -> List[AssetHistory]:
    """All history rows of an asset, newest first

    An existing asset without history yields an empty list; an unknown asset
    raises NotFoundError.
    """
    if await db.get(Asset, asset_id) is None:
        raise NotFoundError("Asset", asset_id)

    result = await db.execute(
        select(AssetHistory)
        .where(AssetHistory.asset_id == asset_id)
        .order_by(AssetHistory.created_at.desc())
    )
    return list(result.scalars().all())


async def get_asset_history_by_id(db: AsyncSession, history_id: UUID) -> Optional[AssetHistory]:
    """Single history row, or None"""
    return await db.get(AssetHistory, history_id)


async def log_status_change(
    db: AsyncSession,
    asset_id: UUID,
    old_status: str,
    new_status: str,
    changed_by: Optional[UUID] = None,
) -> AssetHistory:
    return await _append_and_commit(
        db,
        asset_id=asset_id,
        change_type=ChangeType.STATUS_CHANGE,
        changed_by=changed_by,
        old_value=old_status,
        new_value=new_status,
        description=f"Status changed from {old_status} to {new_status}",
    )


async def log_maintenance_activity(
    db: AsyncSession,
    asset_id: UUID,
    description: str,
    changed_by: Optional[UUID] = None,
) -> AssetHistory:
    return await _append_and_commit(
        db,
        asset_id=asset_id,
        change_type=ChangeType.MAINTENANCE,
        changed_by=changed_by,
        description=description,
    )


async def log_complaint_resolution(
    db: AsyncSession,
    asset_id: UUID,
    complaint_id: UUID,
    changed_by: Optional[UUID] = None,
) -> AssetHistory:
    return await _append_and_commit(
        db,
        asset_id=asset_id,
        change_type=ChangeType.COMPLAINT_RESOLVED,
        changed_by=changed_by,
        new_value=str(complaint_id),
        description=f"Complaint #{complaint_id} resolved",
    )
