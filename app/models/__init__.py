"""
In-memory records for the application.
"""

from app.models.user import User
from app.models.product import Product
from app.models.catalog import Supplier, Procurement, FinancialOffer, LearningResource
from app.models.forum_post import ForumPost
from app.models.metric import Metric
from app.models.storefront import SetupSteps, Storefront

__all__ = [
    "User",
    "Product",
    "Supplier",
    "Procurement",
    "FinancialOffer",
    "LearningResource",
    "ForumPost",
    "Metric",
    "SetupSteps",
    "Storefront",
]
