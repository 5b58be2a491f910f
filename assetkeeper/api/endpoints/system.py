"""
System information endpoints
"""

from datetime import datetime, timezone
from fastapi import APIRouter, Depends
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from assetkeeper.core.config import settings
from assetkeeper.core.database import get_db
from assetkeeper.models.asset import Asset

router = APIRouter()

# Store server start time
server_start_time = datetime.now(timezone.utc)


def format_uptime(uptime_seconds: float) -> str:
    days = int(uptime_seconds // (24 * 3600))
    hours = int((uptime_seconds % (24 * 3600)) // 3600)
    minutes = int((uptime_seconds % 3600) // 60)
    seconds = int(uptime_seconds % 60)

    uptime_parts = []
    if days > 0:
        uptime_parts.append(f"{days}d")
    if hours > 0:
        uptime_parts.append(f"{hours}h")
    if minutes > 0:
        uptime_parts.append(f"{minutes}m")
    uptime_parts.append(f"{seconds}s")
    return " ".join(uptime_parts)


@router.get("/info")
async def get_system_info(db: AsyncSession = Depends(get_db)):
    """Version, uptime and inventory size"""
    current_time = datetime.now(timezone.utc)
    uptime_seconds = (current_time - server_start_time).total_seconds()

    total_result = await db.execute(select(func.count(Asset.id)))

    return {
        "app_name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "uptime": format_uptime(uptime_seconds),
        "uptime_seconds": int(uptime_seconds),
        "server_start_time": server_start_time.isoformat(),
        "current_time": current_time.isoformat(),
        "gemini_model": settings.GEMINI_MODEL,
        "total_assets": total_result.scalar() or 0,
    }
