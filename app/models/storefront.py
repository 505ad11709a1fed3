"""
Storefront setup record, one per user.
"""

from dataclasses import dataclass, field
from datetime import datetime

from app.core.clock import utcnow


@dataclass
class SetupSteps:
    basic_info: bool = True
    products: bool = False
    logo: bool = False
    payment: bool = False
    shipping: bool = False


@dataclass
class Storefront:
    """
    Storefront setup progress.

    ``completion_percentage`` is whatever the caller last stored; it is not
    derived from ``setup_steps``.
    """
    id: int
    user_id: int
    completion_percentage: int = 0
    setup_steps: SetupSteps = field(default_factory=SetupSteps)
    created_at: datetime = field(default_factory=utcnow)

    def __repr__(self):
        return f"<Storefront(id={self.id}, user_id={self.user_id}, completion={self.completion_percentage}%)>"
