"""
Pydantic schemas for storefront setup progress.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.schemas.base import CamelModel, PartialUpdate


class SetupStepsSchema(CamelModel):
    """The five storefront setup steps."""
    basic_info: bool
    products: bool
    logo: bool
    payment: bool
    shipping: bool

    class Config:
        from_attributes = True


class StorefrontUpdate(PartialUpdate):
    """
    Partial storefront update.

    completionPercentage is stored exactly as sent; the server does not
    derive it from setupSteps.
    """
    non_nullable = ("completion_percentage", "setup_steps")

    completion_percentage: Optional[int] = Field(None, ge=0, le=100)
    setup_steps: Optional[SetupStepsSchema] = None


class StorefrontResponse(CamelModel):
    id: int
    user_id: int
    completion_percentage: int
    setup_steps: SetupStepsSchema
    created_at: datetime

    class Config:
        from_attributes = True


class StorefrontProgressResponse(CamelModel):
    user_id: int
    completion_percentage: int
