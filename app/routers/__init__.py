"""
API routers for the application.
"""

from fastapi import APIRouter
from app.routers import (
    auth,
    users,
    product,
    suppliers,
    procurements,
    financial_offers,
    forum_posts,
    learning_resources,
    metrics,
    storefronts,
    recommendations,
    ai_assistant,
)

api_router = APIRouter()

# Include routers
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(product.router)  # Storefront products
api_router.include_router(suppliers.router)  # Marketplace
api_router.include_router(procurements.router)
api_router.include_router(financial_offers.router)  # Finance
api_router.include_router(forum_posts.router)  # Community
api_router.include_router(learning_resources.router)  # Learning hub
api_router.include_router(metrics.router)  # Dashboard metrics
api_router.include_router(storefronts.router)  # Storefront setup
api_router.include_router(recommendations.router)
api_router.include_router(ai_assistant.router)

__all__ = [
    "api_router",
    "auth",
    "users",
    "product",
    "suppliers",
    "procurements",
    "financial_offers",
    "forum_posts",
    "learning_resources",
    "metrics",
    "storefronts",
    "recommendations",
    "ai_assistant",
]
