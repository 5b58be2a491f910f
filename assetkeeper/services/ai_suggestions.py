"""
Asset suggestions from Gemini

Reads the asset and its related rows, sends one prompt, and shapes the answer.
No writes happen here.
"""

import logging
from datetime import datetime
from uuid import UUID

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from assetkeeper.core.errors import NotFoundError
from assetkeeper.models.asset import Asset
from assetkeeper.models.audit import AssetHistory
from assetkeeper.models.complaint import Complaint
from assetkeeper.models.maintenance import MaintenanceSchedule
from assetkeeper.schemas.ai import AiSuggestion
from assetkeeper.services.gemini import GeminiClient
from assetkeeper.services.suggestions import (
    AssetContext,
    build_suggestion_prompt,
    build_condition_prompt,
    build_maintenance_prompt,
    build_replacement_prompt,
    parse_suggestions,
)

logger = logging.getLogger(__name__)

MAINTENANCE_CONTEXT_SIZE = 5
HISTORY_CONTEXT_SIZE = 10


async def gather_asset_context(db: AsyncSession, asset_id: UUID) -> AssetContext:
    asset = await db.get(Asset, asset_id)
    if asset is None:
        raise NotFoundError("Asset", asset_id)

    complaint_result = await db.execute(
        select(func.count(Complaint.id)).where(Complaint.asset_id == asset_id)
    )

    maintenance_result = await db.execute(
        select(MaintenanceSchedule)
        .where(MaintenanceSchedule.asset_id == asset_id)
        .order_by(MaintenanceSchedule.created_at.desc())
        .limit(MAINTENANCE_CONTEXT_SIZE)
    )
    maintenance = [
        f"{m.scheduled_date:%Y-%m-%d} {m.title} ({'selesai' if m.is_completed else 'terjadwal'})"
        for m in maintenance_result.scalars().all()
    ]

    history_result = await db.execute(
        select(AssetHistory)
        .where(AssetHistory.asset_id == asset_id)
        .order_by(AssetHistory.created_at.desc())
        .limit(HISTORY_CONTEXT_SIZE)
    )
    history = [
        f"{h.created_at:%Y-%m-%d} {h.change_type}: {h.description or '-'}"
        for h in history_result.scalars().all()
    ]

    return AssetContext(
        name=asset.name,
        category=asset.category,
        condition=asset.condition,
        owner=asset.owner,
        description=asset.description,
        age_years=max((datetime.utcnow() - asset.created_at).days // 365, 0),
        complaint_count=complaint_result.scalar() or 0,
        maintenance=maintenance,
        history=history,
    )


async def get_ai_suggestions(db: AsyncSession, client: GeminiClient, asset_id: UUID) -> AiSuggestion:
    """Feasibility, maintenance and replacement suggestions for an asset"""
    ctx = await gather_asset_context(db, asset_id)
    text = await client.generate(build_suggestion_prompt(ctx))
    logger.info(f"Gemini suggestions received for asset {asset_id}")
    return parse_suggestions(text)


async def analyze_asset_condition(db: AsyncSession, client: GeminiClient, asset_id: UUID) -> str:
    ctx = await gather_asset_context(db, asset_id)
    return await client.generate(build_condition_prompt(ctx))


async def predict_maintenance_needs(db: AsyncSession, client: GeminiClient, asset_id: UUID) -> str:
    ctx = await gather_asset_context(db, asset_id)
    return await client.generate(build_maintenance_prompt(ctx))


async def get_replacement_recommendation(db: AsyncSession, client: GeminiClient, asset_id: UUID) -> str:
    ctx = await gather_asset_context(db, asset_id)
    return await client.generate(build_replacement_prompt(ctx))
