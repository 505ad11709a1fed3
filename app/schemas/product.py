"""
Pydantic schemas for storefront products.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.schemas.base import CamelModel, PartialUpdate


class ProductBase(CamelModel):
    """Base schema for Product"""
    user_id: int = Field(..., description="Owner user ID")
    name: str = Field(..., min_length=1, max_length=255, description="Product name")
    description: Optional[str] = Field(None, description="Product description")
    price: int = Field(..., ge=0, description="Price in paise")
    image: Optional[str] = Field(None, description="Product image URL")


class ProductCreate(ProductBase):
    """Schema for creating a new product"""
    pass


class ProductUpdate(PartialUpdate):
    """Schema for updating a product"""
    non_nullable = ("user_id", "name", "price")

    user_id: Optional[int] = None
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    price: Optional[int] = Field(None, ge=0)
    image: Optional[str] = None


class ProductResponse(ProductBase):
    """Schema for product response"""
    id: int
    created_at: datetime

    class Config:
        from_attributes = True
