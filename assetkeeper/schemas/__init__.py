"""
Pydantic schemas for request/response validation
"""

from assetkeeper.schemas.asset import (
    AssetBase,
    AssetCreate,
    AssetUpdate,
    AssetFilter,
    AssetResponse,
    AssetListResponse
)
from assetkeeper.schemas.history import (
    AssetHistoryCreate,
    AssetHistoryResponse
)
from assetkeeper.schemas.complaint import (
    ComplaintCreate,
    PublicComplaintCreate,
    ComplaintUpdate,
    ComplaintResponse
)
from assetkeeper.schemas.maintenance import (
    MaintenanceScheduleCreate,
    MaintenanceScheduleUpdate,
    MaintenanceScheduleResponse,
    CalendarEvent
)
from assetkeeper.schemas.user import (
    UserCreate,
    UserUpdate,
    UserResponse,
    LoginRequest,
    UserActivityLogCreate,
    UserActivityLogResponse
)
from assetkeeper.schemas.report import (
    ReportFilter,
    ComplaintReport,
    MaintenanceReport,
    DashboardStats,
    MaintenanceStatistics
)
from assetkeeper.schemas.ai import AiSuggestion, AiTextResponse
from assetkeeper.schemas.common import (
    PaginationParams,
    Pagination,
    MessageResponse
)

__all__ = [
    "AssetBase",
    "AssetCreate",
    "AssetUpdate",
    "AssetFilter",
    "AssetResponse",
    "AssetListResponse",
    "AssetHistoryCreate",
    "AssetHistoryResponse",
    "ComplaintCreate",
    "PublicComplaintCreate",
    "ComplaintUpdate",
    "ComplaintResponse",
    "MaintenanceScheduleCreate",
    "MaintenanceScheduleUpdate",
    "MaintenanceScheduleResponse",
    "CalendarEvent",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "LoginRequest",
    "UserActivityLogCreate",
    "UserActivityLogResponse",
    "ReportFilter",
    "ComplaintReport",
    "MaintenanceReport",
    "DashboardStats",
    "MaintenanceStatistics",
    "AiSuggestion",
    "AiTextResponse",
    "PaginationParams",
    "Pagination",
    "MessageResponse"
]
