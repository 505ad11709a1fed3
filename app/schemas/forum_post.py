"""
Pydantic schemas for community forum posts.
"""

from datetime import datetime
from typing import List

from pydantic import Field

from app.schemas.base import CamelModel


class ForumPostCreate(CamelModel):
    """Schema for creating a forum post. responseCount is server-managed."""
    user_id: int
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    tags: List[str] = Field(default_factory=list)


class ForumPostResponse(ForumPostCreate):
    id: int
    response_count: int
    created_at: datetime

    class Config:
        from_attributes = True
