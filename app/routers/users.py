"""
User profile endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from app.core.store import MemoryStore, get_store
from app.schemas.user import UserResponse
from app.services.user_repository import UserRepository

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/{user_id}", response_model=UserResponse)
def get_user_by_id(user_id: int, store: MemoryStore = Depends(get_store)):
    """
    Get a specific user by ID.

    Raises:
        HTTPException 404: If user not found
    """
    user = UserRepository.get_by_id(store, user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return user
