"""
Common schemas used across the application
"""

from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, Field


class PaginationParams(BaseModel):
    """Pagination parameters (1-indexed pages)"""
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


class Pagination(BaseModel):
    """Pagination block returned alongside a page of results"""
    page: int
    limit: int
    total: int = Field(ge=0)
    total_pages: int = Field(ge=0)


class MessageResponse(BaseModel):
    """Plain acknowledgement"""
    success: bool = True
    message: Optional[str] = None


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Stored timestamps are naive UTC; convert aware inputs"""
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value
