"""
Pydantic schemas for User registration, login and responses.
"""

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from app.core.auth import PASSWORD_MAX_BYTES, password_too_long
from app.schemas.base import CamelModel


class UserBase(CamelModel):
    """Base schema for User with common fields."""
    username: str = Field(..., min_length=1, max_length=255, description="Login name (unique)")
    name: str = Field(..., min_length=1, max_length=255, description="Full name")
    business_name: str = Field(..., min_length=1, max_length=255, description="Business name")
    email: EmailStr = Field(..., description="Email address (unique)")
    phone: Optional[str] = Field(None, max_length=50, description="Contact phone number")
    profile_image: Optional[str] = Field(None, description="Profile image URL")


class UserCreate(UserBase):
    """Schema for registering a new user."""
    password: str = Field(..., description="Plain text password (will be hashed)")

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if password_too_long(value):
            raise ValueError(f"password must be at most {PASSWORD_MAX_BYTES} bytes when UTF-8 encoded")
        return value


class UserResponse(UserBase):
    """Schema for user response (excludes password)."""
    id: int
    created_at: datetime

    class Config:
        from_attributes = True


class LoginRequest(CamelModel):
    """Schema for login request."""
    username: str = Field(..., description="Login name")
    password: str = Field(..., description="Plain text password")
