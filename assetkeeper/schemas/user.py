"""
User and activity log schemas
"""

from typing import Optional
from datetime import datetime
from uuid import UUID
from pydantic import BaseModel, EmailStr, Field, ConfigDict

from assetkeeper.models.user import UserRole


class UserCreate(BaseModel):
    """New user account"""
    model_config = ConfigDict(use_enum_values=True)

    email: EmailStr
    password: str = Field(..., min_length=6)
    name: str = Field(..., min_length=1, max_length=255)
    role: UserRole = UserRole.STAFF


class UserUpdate(BaseModel):
    """User update schema (all fields optional)"""
    model_config = ConfigDict(use_enum_values=True)

    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=6)
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    role: Optional[UserRole] = None
    is_active: Optional[bool] = None


class UserResponse(BaseModel):
    """User as seen by callers; ``password`` is always blank"""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    password: str = ""
    name: str
    role: UserRole
    is_active: bool
    created_at: datetime
    updated_at: datetime


class LoginRequest(BaseModel):
    """Credentials"""
    email: EmailStr
    password: str


class UserActivityLogCreate(BaseModel):
    """Activity entry to record"""
    user_id: UUID
    action: str = Field(..., min_length=1, max_length=100)
    resource_type: str = Field(..., min_length=1, max_length=100)
    resource_id: Optional[UUID] = None
    description: Optional[str] = None


class UserActivityLogResponse(BaseModel):
    """Stored activity entry"""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    action: str
    resource_type: str
    resource_id: Optional[UUID] = None
    description: Optional[str] = None
    created_at: datetime
