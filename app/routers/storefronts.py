"""
Digital storefront setup endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from app.core.store import MemoryStore, get_store
from app.schemas.storefront import (
    StorefrontProgressResponse,
    StorefrontResponse,
    StorefrontUpdate,
)
from app.services.dashboard_repository import StorefrontRepository

router = APIRouter(prefix="/storefronts", tags=["Storefront"])


@router.get("/{user_id}", response_model=StorefrontResponse)
def get_storefront(user_id: int, store: MemoryStore = Depends(get_store)):
    """
    Get the storefront of a user.

    Raises:
        HTTPException 404: If the user has no storefront yet
    """
    storefront = StorefrontRepository.get(store, user_id)
    if not storefront:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Storefront not found"
        )
    return storefront


@router.put("/{user_id}", response_model=StorefrontResponse)
def update_storefront(
    user_id: int,
    storefront_update: StorefrontUpdate,
    store: MemoryStore = Depends(get_store),
):
    """
    Create or update the storefront of a user.

    The read-compute-write of completionPercentage happens on the client, so
    two concurrent editors can overwrite each other's progress; the last
    write wins.
    """
    return StorefrontRepository.update(store, user_id, storefront_update)


@router.get("/{user_id}/progress", response_model=StorefrontProgressResponse)
def get_storefront_progress(user_id: int, store: MemoryStore = Depends(get_store)):
    """Completion percentage of a user's storefront, 0 when none exists"""
    return StorefrontProgressResponse(
        user_id=user_id,
        completion_percentage=StorefrontRepository.get_progress(store, user_id),
    )
