"""
Asset handlers: creation, listing and the archive/restore/permanent-delete lifecycle
"""

import logging
import math
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select, delete, func, or_
from sqlalchemy.ext.asyncio import AsyncSession

from assetkeeper.core.config import settings
from assetkeeper.core.errors import AssetKeeperError, NotFoundError
from assetkeeper.core.lifecycle import LifecycleAction, state_of, transition
from assetkeeper.crud.asset_history import append_history
from assetkeeper.models.asset import Asset
from assetkeeper.models.audit import AssetHistory, ChangeType
from assetkeeper.models.complaint import Complaint
from assetkeeper.models.maintenance import MaintenanceSchedule
from assetkeeper.models.user import User
from assetkeeper.schemas.asset import AssetCreate, AssetUpdate, AssetFilter
from assetkeeper.schemas.common import Pagination

logger = logging.getLogger(__name__)

# Columns that cannot be cleared through an update
_REQUIRED_FIELDS = ("name", "category", "condition", "owner")


async def _generate_unique_qr_code(db: AsyncSession) -> str:
    """Generate a QR code value not used by any stored asset"""
    for _ in range(settings.QR_CODE_MAX_ATTEMPTS):
        candidate = Asset.generate_qr_code(settings.QR_CODE_PREFIX)
        result = await db.execute(select(Asset.id).where(Asset.qr_code == candidate))
        if result.scalar_one_or_none() is None:
            return candidate
    raise AssetKeeperError(
        f"Could not generate a unique QR code after {settings.QR_CODE_MAX_ATTEMPTS} attempts"
    )


async def _get_asset_or_raise(db: AsyncSession, asset_id: UUID) -> Asset:
    asset = await db.get(Asset, asset_id)
    if asset is None:
        raise NotFoundError("Asset", asset_id)
    return asset


async def create_asset(db: AsyncSession, data: AssetCreate) -> Asset:
    """Create a new active asset with a freshly generated QR code"""
    try:
        asset = Asset(**data.model_dump())
        asset.qr_code = await _generate_unique_qr_code(db)
        asset.is_archived = False
        db.add(asset)
        await db.commit()
    except Exception as e:
        await db.rollback()
        logger.error(f"Asset creation failed: {e}")
        raise
    await db.refresh(asset)
    logger.info(f"Asset {asset.id} created with QR code {asset.qr_code}")
    return asset


async def get_assets(db: AsyncSession, filters: Optional[AssetFilter] = None) -> dict:
    """Get a page of assets, most recent first

    Archived assets are only listed when ``is_archived`` is requested.
    """
    filters = filters or AssetFilter()

    conditions = [Asset.is_archived == filters.is_archived]
    if filters.search:
        pattern = f"%{filters.search}%"
        conditions.append(or_(Asset.name.ilike(pattern), Asset.description.ilike(pattern)))
    if filters.category:
        conditions.append(Asset.category == filters.category)
    if filters.condition:
        conditions.append(Asset.condition == filters.condition)
    if filters.owner:
        conditions.append(Asset.owner.ilike(f"%{filters.owner}%"))

    offset = (filters.page - 1) * filters.limit
    result = await db.execute(
        select(Asset)
        .where(*conditions)
        .order_by(Asset.created_at.desc())
        .offset(offset)
        .limit(filters.limit)
    )
    assets = list(result.scalars().all())

    total_result = await db.execute(select(func.count(Asset.id)).where(*conditions))
    total = total_result.scalar() or 0

    return {
        "assets": assets,
        "pagination": Pagination(
            page=filters.page,
            limit=filters.limit,
            total=total,
            total_pages=math.ceil(total / filters.limit),
        ),
    }


async def get_asset_by_id(db: AsyncSession, asset_id: UUID) -> Optional[Asset]:
    return await db.get(Asset, asset_id)


async def get_asset_by_qr_code(db: AsyncSession, qr_code: str) -> Optional[Asset]:
    """Public lookup; archived assets resolve too"""
    result = await db.execute(select(Asset).where(Asset.qr_code == qr_code))
    return result.scalar_one_or_none()


async def update_asset(
    db: AsyncSession,
    asset_id: UUID,
    data: AssetUpdate,
    changed_by: Optional[UUID] = None,
) -> Asset:
    """Edit asset fields

    A change of ``condition`` appends one status_change history row; other
    field edits are not audited.
    """
    try:
        asset = await _get_asset_or_raise(db, asset_id)
        if changed_by is not None and await db.get(User, changed_by) is None:
            raise NotFoundError("User", changed_by)

        update_data = data.model_dump(exclude_unset=True)
        for field in _REQUIRED_FIELDS:
            if field in update_data and update_data[field] is None:
                del update_data[field]

        old_condition = asset.condition
        new_condition = update_data.get("condition")

        for field, value in update_data.items():
            setattr(asset, field, value)
        asset.updated_at = datetime.utcnow()

        if new_condition is not None and new_condition != old_condition:
            await append_history(
                db,
                asset_id=asset.id,
                change_type=ChangeType.STATUS_CHANGE,
                changed_by=changed_by,
                old_value=old_condition,
                new_value=new_condition,
                description=f"Asset condition changed from {old_condition} to {new_condition}",
            )

        await db.commit()
    except Exception as e:
        await db.rollback()
        logger.error(f"Asset update failed: {e}")
        raise
    return asset


async def delete_asset(
    db: AsyncSession,
    asset_id: UUID,
    changed_by: Optional[UUID] = None,
) -> bool:
    """Archive (soft delete) an asset

    Archiving an already archived asset succeeds and records another row.
    """
    try:
        asset = await _get_asset_or_raise(db, asset_id)
        transition(state_of(asset), LifecycleAction.ARCHIVE, asset_id)

        asset.is_archived = True
        asset.updated_at = datetime.utcnow()
        await append_history(
            db,
            asset_id=asset.id,
            change_type=ChangeType.ARCHIVED,
            changed_by=changed_by,
            description="Asset archived (soft deleted)",
        )
        await db.commit()
    except Exception as e:
        await db.rollback()
        logger.error(f"Asset archive failed: {e}")
        raise
    logger.info(f"Asset {asset_id} archived")
    return True


async def get_archived_assets(db: AsyncSession) -> List[Asset]:
    """Archived assets, most recently archived first"""
    result = await db.execute(
        select(Asset)
        .where(Asset.is_archived.is_(True))
        .order_by(Asset.updated_at.desc())
    )
    return list(result.scalars().all())


async def restore_asset(
    db: AsyncSession,
    asset_id: UUID,
    changed_by: Optional[UUID] = None,
) -> Asset:
    """Bring an archived asset back to active"""
    try:
        asset = await _get_asset_or_raise(db, asset_id)
        transition(state_of(asset), LifecycleAction.RESTORE, asset_id)

        asset.is_archived = False
        asset.updated_at = datetime.utcnow()
        await append_history(
            db,
            asset_id=asset.id,
            change_type=ChangeType.RESTORED,
            changed_by=changed_by,
            description="Asset restored from archive",
        )
        await db.commit()
    except Exception as e:
        await db.rollback()
        logger.error(f"Asset restoration failed: {e}")
        raise
    logger.info(f"Asset {asset_id} restored")
    return asset


async def permanent_delete_asset(db: AsyncSession, asset_id: UUID) -> bool:
    """Remove an archived asset and everything that references it

    Complaints, maintenance schedules and history rows go first and the asset
    row last, all in one transaction.
    """
    try:
        asset = await _get_asset_or_raise(db, asset_id)
        transition(state_of(asset), LifecycleAction.PURGE, asset_id)

        await db.execute(delete(Complaint).where(Complaint.asset_id == asset_id))
        await db.execute(
            delete(MaintenanceSchedule).where(MaintenanceSchedule.asset_id == asset_id)
        )
        await db.execute(delete(AssetHistory).where(AssetHistory.asset_id == asset_id))
        await db.execute(delete(Asset).where(Asset.id == asset_id))
        await db.commit()
    except Exception as e:
        await db.rollback()
        logger.error(f"Permanent asset deletion failed: {e}")
        raise
    logger.info(f"Asset {asset_id} permanently deleted")
    return True
