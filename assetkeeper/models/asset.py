"""
Asset model with fixed categories and conditions
"""

import secrets
import time
from enum import Enum
from sqlalchemy import Column, String, Text, Boolean, CheckConstraint, Index
from assetkeeper.models.base import BaseModel, enum_check


class AssetCategory(str, Enum):
    """Fixed asset categories"""
    MONITOR = "monitor"
    CPU = "cpu"
    AC = "ac"
    CHAIR = "chair"
    DESK = "desk"
    DISPENSER = "dispenser"
    CCTV = "cctv"
    ROUTER = "router"
    LAN_CABLE = "lan-cable"


class AssetCondition(str, Enum):
    """Physical condition of an asset (ordered by convention only)"""
    NEW = "new"
    GOOD = "good"
    UNDER_REPAIR = "under-repair"
    BROKEN = "broken"


class Asset(BaseModel):
    """Physical inventory item"""

    __tablename__ = "assets"

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String(50), nullable=False)
    condition = Column(String(50), nullable=False, default=AssetCondition.NEW.value)
    owner = Column(String(255), nullable=False)
    photo_url = Column(String(1000), nullable=True)

    # Printed on the label; never regenerated after creation
    qr_code = Column(String(100), unique=True, nullable=False)

    # Soft delete flag
    is_archived = Column(Boolean, nullable=False, default=False)

    __table_args__ = (
        CheckConstraint(enum_check("category", AssetCategory), name="ck_asset_category"),
        CheckConstraint(enum_check("condition", AssetCondition), name="ck_asset_condition"),
        Index("idx_assets_archived_created", "is_archived", "created_at"),
    )

    @staticmethod
    def generate_qr_code(prefix: str = "ASSET") -> str:
        """Generate a QR code value from a nanosecond timestamp and a random suffix"""
        return f"{prefix}-{time.time_ns()}-{secrets.token_hex(4)}"
