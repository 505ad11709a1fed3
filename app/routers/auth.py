"""
Authentication API endpoints.

Registration and a credential check for the demo front end. No session or
token is issued; the client keeps the returned user.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from app.core.auth import verify_password
from app.core.store import MemoryStore, get_store
from app.schemas.user import LoginRequest, UserCreate, UserResponse
from app.services.user_repository import UserRepository

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(user_data: UserCreate, store: MemoryStore = Depends(get_store)):
    """
    Register a new user.

    Args:
        user_data: Registration data with plain text password
        store: In-memory store

    Returns:
        Created user information (without password)

    Raises:
        HTTPException 409: If username or email is already registered
    """
    if UserRepository.get_by_username(store, user_data.username):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username already exists"
        )

    if UserRepository.get_by_email(store, user_data.email):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already registered"
        )

    return UserRepository.create(store, user_data)


@router.post("/login", response_model=UserResponse)
def login(login_data: LoginRequest, store: MemoryStore = Depends(get_store)):
    """
    Check a username/password pair.

    Unknown usernames and wrong passwords get the same 401 so the response
    does not reveal which usernames exist.

    Args:
        login_data: Login credentials (username and plain text password)
        store: In-memory store

    Returns:
        User information (without password)

    Raises:
        HTTPException 401: If credentials are invalid
    """
    user = UserRepository.get_by_username(store, login_data.username)
    if not user or not verify_password(login_data.password, user.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    return user
