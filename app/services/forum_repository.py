"""
Repository layer for community forum posts.
"""

from typing import List, Optional

from app.core.store import MemoryStore
from app.models import ForumPost
from app.schemas.forum_post import ForumPostCreate


class ForumPostRepository:
    """Repository for ForumPost operations"""

    @staticmethod
    def create(store: MemoryStore, post: ForumPostCreate) -> ForumPost:
        """Create a new post; new posts always start without responses"""
        return store.forum_posts.insert(**post.model_dump(), response_count=0)

    @staticmethod
    def get_by_id(store: MemoryStore, post_id: int) -> Optional[ForumPost]:
        return store.forum_posts.get(post_id)

    @staticmethod
    def get_all(store: MemoryStore, tag: Optional[str] = None) -> List[ForumPost]:
        if tag:
            return store.forum_posts.list(lambda p: tag in p.tags)
        return store.forum_posts.list()
