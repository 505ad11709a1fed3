"""
Read-only catalog records: suppliers, procurement opportunities,
financial offers and learning resources.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from app.core.clock import utcnow


@dataclass
class Supplier:
    id: int
    name: str
    category: str
    description: Optional[str] = None
    cost_savings: Optional[int] = None  # percentage
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class Procurement:
    """A tender or sourcing opportunity. Past due dates are kept as is."""
    id: int
    title: str
    organization: str
    description: str
    category: str
    due_date: datetime
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class FinancialOffer:
    """
    Financing product.

    ``amount`` is in paise, ``interest_rate`` in basis points (850 = 8.5%).
    """
    id: int
    type: str
    amount: int
    interest_rate: int
    term_months: int
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class LearningResource:
    id: int
    title: str
    type: str
    description: str
    duration: int  # minutes
    level: str
    created_at: datetime = field(default_factory=utcnow)
