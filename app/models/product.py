"""
Product record.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from app.core.clock import utcnow


@dataclass
class Product:
    """
    A product listed on a user's storefront.

    ``price`` is in the smallest currency unit (paise).
    """
    id: int
    user_id: int
    name: str
    price: int
    description: Optional[str] = None
    image: Optional[str] = None
    created_at: datetime = field(default_factory=utcnow)

    def __repr__(self):
        return f"<Product(id={self.id}, user_id={self.user_id}, name='{self.name}', price={self.price})>"
