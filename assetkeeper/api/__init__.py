"""
API router aggregation
"""

from fastapi import APIRouter
from assetkeeper.api.endpoints import (
    activity_logs,
    ai,
    asset_history,
    assets,
    auth,
    complaints,
    dashboard,
    maintenance,
    public,
    reports,
    system,
    users,
)

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(
    system.router,
    prefix="/system",
    tags=["System"]
)

api_router.include_router(
    assets.router,
    prefix="/assets",
    tags=["Assets"]
)

api_router.include_router(
    asset_history.router,
    prefix="/history",
    tags=["Asset History"]
)

api_router.include_router(
    complaints.router,
    prefix="/complaints",
    tags=["Complaints"]
)

api_router.include_router(
    maintenance.router,
    prefix="/maintenance",
    tags=["Maintenance"]
)

api_router.include_router(
    users.router,
    prefix="/users",
    tags=["Users"]
)

api_router.include_router(
    auth.router,
    prefix="/auth",
    tags=["Auth"]
)

api_router.include_router(
    activity_logs.router,
    prefix="/activity-logs",
    tags=["Activity Logs"]
)

api_router.include_router(
    dashboard.router,
    prefix="/dashboard",
    tags=["Dashboard"]
)

api_router.include_router(
    reports.router,
    prefix="/reports",
    tags=["Reports"]
)

api_router.include_router(
    ai.router,
    prefix="/ai",
    tags=["AI Suggestions"]
)

api_router.include_router(
    public.router,
    prefix="/public",
    tags=["Public"]
)
