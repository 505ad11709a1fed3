"""
Dashboard metrics record, one per user.
"""

from dataclasses import dataclass, field
from datetime import datetime

from app.core.clock import utcnow


@dataclass
class Metric:
    id: int
    user_id: int
    store_visits: int = 0
    orders: int = 0
    connections: int = 0
    revenue: int = 0  # paise
    last_updated: datetime = field(default_factory=utcnow)
