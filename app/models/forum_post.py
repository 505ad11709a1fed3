"""
Community forum post record.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from app.core.clock import utcnow


@dataclass
class ForumPost:
    id: int
    user_id: int
    title: str
    content: str
    response_count: int = 0
    tags: List[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=utcnow)

    def __repr__(self):
        return f"<ForumPost(id={self.id}, user_id={self.user_id}, title='{self.title}')>"
