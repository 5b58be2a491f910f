"""
Database models for AssetKeeper
"""

from assetkeeper.models.asset import Asset, AssetCategory, AssetCondition
from assetkeeper.models.audit import AssetHistory, ChangeType, UserActivityLog
from assetkeeper.models.complaint import Complaint, ComplaintStatus
from assetkeeper.models.maintenance import MaintenanceSchedule
from assetkeeper.models.user import User, UserRole

__all__ = [
    "Asset",
    "AssetCategory",
    "AssetCondition",
    "AssetHistory",
    "ChangeType",
    "UserActivityLog",
    "Complaint",
    "ComplaintStatus",
    "MaintenanceSchedule",
    "User",
    "UserRole",
]
