"""
Pydantic schemas for dashboard metrics.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.schemas.base import CamelModel, PartialUpdate


class MetricUpdate(PartialUpdate):
    """Counters to set; missing counters start at zero on first write."""
    non_nullable = ("store_visits", "orders", "connections", "revenue")

    store_visits: Optional[int] = Field(None, ge=0)
    orders: Optional[int] = Field(None, ge=0)
    connections: Optional[int] = Field(None, ge=0)
    revenue: Optional[int] = Field(None, ge=0, description="Revenue in paise")


class MetricResponse(CamelModel):
    id: int
    user_id: int
    store_visits: int
    orders: int
    connections: int
    revenue: int
    last_updated: datetime

    class Config:
        from_attributes = True
