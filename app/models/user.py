"""
User record.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from app.core.clock import utcnow


@dataclass
class User:
    """
    A registered business owner.

    ``password`` holds the bcrypt hash, never the plain text.
    """
    id: int
    username: str
    password: str
    name: str
    business_name: str
    email: str
    phone: Optional[str] = None
    profile_image: Optional[str] = None
    created_at: datetime = field(default_factory=utcnow)

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}', email='{self.email}')>"
