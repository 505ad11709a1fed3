"""
Repository layer for User operations.
"""

from typing import Optional

from app.core.auth import get_password_hash
from app.core.store import MemoryStore
from app.models import User
from app.schemas.user import UserCreate


class UserRepository:
    """Repository for User operations"""

    @staticmethod
    def create(store: MemoryStore, user: UserCreate) -> User:
        """Create a new user, hashing the password"""
        data = user.model_dump()
        data["password"] = get_password_hash(data["password"])
        return store.users.insert(**data)

    @staticmethod
    def get_by_id(store: MemoryStore, user_id: int) -> Optional[User]:
        return store.users.get(user_id)

    @staticmethod
    def get_by_username(store: MemoryStore, username: str) -> Optional[User]:
        return store.users.find(lambda u: u.username == username)

    @staticmethod
    def get_by_email(store: MemoryStore, email: str) -> Optional[User]:
        """Get user by email (case-insensitive)"""
        email = email.lower()
        return store.users.find(lambda u: u.email.lower() == email)
