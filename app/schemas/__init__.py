"""
Schemas for the application.

This module exports all Pydantic models and schemas used for request/response validation.
"""

from app.schemas.base import CamelModel, PartialUpdate

from app.schemas.user import (
    UserBase,
    UserCreate,
    UserResponse,
    LoginRequest,
)

from app.schemas.product import (
    ProductBase,
    ProductCreate,
    ProductUpdate,
    ProductResponse,
)

from app.schemas.catalog import (
    # Supplier schemas
    SupplierCreate,
    SupplierResponse,
    # Procurement schemas
    ProcurementCreate,
    ProcurementResponse,
    # Financial offer schemas
    FinancialOfferCreate,
    FinancialOfferResponse,
    # Learning resource schemas
    LearningResourceCreate,
    LearningResourceResponse,
    # Dashboard
    RecommendationsResponse,
)

from app.schemas.forum_post import ForumPostCreate, ForumPostResponse
from app.schemas.metric import MetricUpdate, MetricResponse
from app.schemas.storefront import (
    SetupStepsSchema,
    StorefrontUpdate,
    StorefrontResponse,
    StorefrontProgressResponse,
)

from app.schemas.ai_assistant import (
    AssistantMessage,
    AssistantReply,
    AdviceRequest,
    ProductDescriptionRequest,
    SupplierMatchRequest,
    SupplierMatch,
    SupplierMatchResponse,
    ChatTurn,
    ChatRequest,
)

__all__ = [
    "CamelModel",
    "PartialUpdate",
    "UserBase",
    "UserCreate",
    "UserResponse",
    "LoginRequest",
    "ProductBase",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "SupplierCreate",
    "SupplierResponse",
    "ProcurementCreate",
    "ProcurementResponse",
    "FinancialOfferCreate",
    "FinancialOfferResponse",
    "LearningResourceCreate",
    "LearningResourceResponse",
    "RecommendationsResponse",
    "ForumPostCreate",
    "ForumPostResponse",
    "MetricUpdate",
    "MetricResponse",
    "SetupStepsSchema",
    "StorefrontUpdate",
    "StorefrontResponse",
    "StorefrontProgressResponse",
    "AssistantMessage",
    "AssistantReply",
    "AdviceRequest",
    "ProductDescriptionRequest",
    "SupplierMatchRequest",
    "SupplierMatch",
    "SupplierMatchResponse",
    "ChatTurn",
    "ChatRequest",
]
