"""
Pydantic schemas for the read-only catalogs: suppliers, procurement
opportunities, financial offers and learning resources.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from app.schemas.base import CamelModel


# ============================================================================
# Supplier Schemas
# ============================================================================

class SupplierCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    cost_savings: Optional[int] = Field(None, ge=0, le=100, description="Potential cost savings in percent")


class SupplierResponse(SupplierCreate):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True


# ============================================================================
# Procurement Schemas
# ============================================================================

class ProcurementCreate(CamelModel):
    title: str = Field(..., min_length=1)
    organization: str = Field(..., min_length=1)
    description: str
    category: str = Field(..., min_length=1)
    due_date: datetime


class ProcurementResponse(ProcurementCreate):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True


# ============================================================================
# Financial Offer Schemas
# ============================================================================

FinancialOfferType = Literal["loan", "invoice_financing", "equipment_loan"]


class FinancialOfferCreate(CamelModel):
    type: FinancialOfferType
    amount: int = Field(..., ge=0, description="Amount in paise")
    interest_rate: int = Field(..., ge=0, description="Interest rate in basis points (850 = 8.5%)")
    term_months: int = Field(..., gt=0)


class FinancialOfferResponse(FinancialOfferCreate):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True


# ============================================================================
# Learning Resource Schemas
# ============================================================================

LearningResourceType = Literal["video", "article", "guide"]
LearningLevel = Literal["beginner", "intermediate", "advanced"]


class LearningResourceCreate(CamelModel):
    title: str = Field(..., min_length=1)
    type: LearningResourceType
    description: str
    duration: int = Field(..., ge=0, description="Duration in minutes")
    level: LearningLevel


class LearningResourceResponse(LearningResourceCreate):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True


# ============================================================================
# Dashboard Recommendations
# ============================================================================

class RecommendationsResponse(CamelModel):
    """First few entries of each recommended catalog for the dashboard."""
    suppliers: List[SupplierResponse]
    procurements: List[ProcurementResponse]
    financial_offers: List[FinancialOfferResponse]

    class Config:
        from_attributes = True
