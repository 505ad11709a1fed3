"""
Community forum endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.core.store import MemoryStore, get_store
from app.schemas.forum_post import ForumPostCreate, ForumPostResponse
from app.services.forum_repository import ForumPostRepository

router = APIRouter(prefix="/forum-posts", tags=["Community"])


@router.get("", response_model=List[ForumPostResponse])
def get_forum_posts(
    tag: Optional[str] = Query(None),
    store: MemoryStore = Depends(get_store),
):
    """Get all forum posts, optionally only those carrying a tag"""
    return ForumPostRepository.get_all(store, tag)


@router.post("", response_model=ForumPostResponse, status_code=status.HTTP_201_CREATED)
def create_forum_post(post: ForumPostCreate, store: MemoryStore = Depends(get_store)):
    """Create a forum post. responseCount always starts at 0."""
    return ForumPostRepository.create(store, post)


@router.get("/{post_id}", response_model=ForumPostResponse)
def get_forum_post(post_id: int, store: MemoryStore = Depends(get_store)):
    post = ForumPostRepository.get_by_id(store, post_id)
    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Forum post not found"
        )
    return post
