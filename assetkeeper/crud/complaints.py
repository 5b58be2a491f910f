"""
Complaint handlers
"""

import logging
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from assetkeeper.core.errors import NotFoundError
from assetkeeper.crud.asset_history import append_history
from assetkeeper.models.asset import Asset
from assetkeeper.models.audit import ChangeType
from assetkeeper.models.complaint import Complaint, ComplaintStatus, PENDING_STATUSES
from assetkeeper.models.user import User
from assetkeeper.schemas.complaint import ComplaintCreate, ComplaintUpdate

logger = logging.getLogger(__name__)


async def create_complaint(db: AsyncSession, data: ComplaintCreate) -> Complaint:
    """Record a complaint against an active asset

    Archived assets are reported as missing so they stay hidden from the
    public submission path.
    """
    asset = await db.get(Asset, data.asset_id)
    if asset is None or asset.is_archived:
        raise NotFoundError("Asset", data.asset_id)

    try:
        complaint = Complaint(**data.model_dump())
        db.add(complaint)
        await db.commit()
    except Exception as e:
        await db.rollback()
        logger.error(f"Complaint creation failed: {e}")
        raise
    logger.info(f"Complaint {complaint.id} filed against asset {asset.id}")
    return complaint


async def get_complaints(db: AsyncSession) -> List[Complaint]:
    """All complaints, newest first"""
    result = await db.execute(select(Complaint).order_by(Complaint.created_at.desc()))
    return list(result.scalars().all())


async def get_complaints_by_asset_id(db: AsyncSession, asset_id: UUID) -> List[Complaint]:
    result = await db.execute(
        select(Complaint)
        .where(Complaint.asset_id == asset_id)
        .order_by(Complaint.created_at.desc())
    )
    return list(result.scalars().all())


async def get_complaint_by_id(db: AsyncSession, complaint_id: UUID) -> Optional[Complaint]:
    return await db.get(Complaint, complaint_id)


async def update_complaint(db: AsyncSession, complaint_id: UUID, data: ComplaintUpdate) -> Complaint:
    """Change a complaint's status

    Moving to ``repaired`` with a resolver also logs the resolution in the
    asset's history.
    """
    try:
        complaint = await db.get(Complaint, complaint_id)
        if complaint is None:
            raise NotFoundError("Complaint", complaint_id)
        if data.resolved_by is not None and await db.get(User, data.resolved_by) is None:
            raise NotFoundError("User", data.resolved_by)

        previous_status = complaint.status
        complaint.status = data.status
        if data.resolved_by is not None and data.status == ComplaintStatus.REPAIRED.value:
            complaint.resolved_by = data.resolved_by
        complaint.updated_at = datetime.utcnow()

        if (
            data.status == ComplaintStatus.REPAIRED.value
            and previous_status != data.status
            and data.resolved_by is not None
        ):
            await append_history(
                db,
                asset_id=complaint.asset_id,
                change_type=ChangeType.COMPLAINT_RESOLVED,
                changed_by=data.resolved_by,
                new_value=str(complaint.id),
                description=f"Complaint #{complaint.id} resolved",
            )

        await db.commit()
    except Exception as e:
        await db.rollback()
        logger.error(f"Complaint update failed: {e}")
        raise
    return complaint


async def get_pending_complaints(db: AsyncSession) -> List[Complaint]:
    """Complaints still waiting for repair (needs-repair or urgent)"""
    result = await db.execute(
        select(Complaint)
        .where(Complaint.status.in_(PENDING_STATUSES))
        .order_by(Complaint.created_at.desc())
    )
    return list(result.scalars().all())
