"""
AI suggestion endpoints
"""

from uuid import UUID
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from assetkeeper.core.database import get_db
from assetkeeper.schemas.ai import AiSuggestion, AiTextResponse
from assetkeeper.services import ai_suggestions
from assetkeeper.services.gemini import GeminiClient, get_gemini_client

router = APIRouter()


@router.get("/assets/{asset_id}/suggestions", response_model=AiSuggestion)
async def suggestions(
    asset_id: UUID,
    db: AsyncSession = Depends(get_db),
    client: GeminiClient = Depends(get_gemini_client)
):
    """Feasibility, maintenance and replacement suggestions"""
    return await ai_suggestions.get_ai_suggestions(db, client, asset_id)


@router.get("/assets/{asset_id}/condition", response_model=AiTextResponse)
async def condition_analysis(
    asset_id: UUID,
    db: AsyncSession = Depends(get_db),
    client: GeminiClient = Depends(get_gemini_client)
):
    text = await ai_suggestions.analyze_asset_condition(db, client, asset_id)
    return AiTextResponse(asset_id=str(asset_id), result=text)


@router.get("/assets/{asset_id}/maintenance", response_model=AiTextResponse)
async def maintenance_prediction(
    asset_id: UUID,
    db: AsyncSession = Depends(get_db),
    client: GeminiClient = Depends(get_gemini_client)
):
    text = await ai_suggestions.predict_maintenance_needs(db, client, asset_id)
    return AiTextResponse(asset_id=str(asset_id), result=text)


@router.get("/assets/{asset_id}/replacement", response_model=AiTextResponse)
async def replacement_recommendation(
    asset_id: UUID,
    db: AsyncSession = Depends(get_db),
    client: GeminiClient = Depends(get_gemini_client)
):
    text = await ai_suggestions.get_replacement_recommendation(db, client, asset_id)
    return AiTextResponse(asset_id=str(asset_id), result=text)
