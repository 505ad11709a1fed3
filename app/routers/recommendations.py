"""
Dashboard recommendations endpoint.
"""

from fastapi import APIRouter, Depends

from app.core.store import MemoryStore, get_store
from app.schemas.catalog import RecommendationsResponse
from app.services.catalog_repository import (
    FinancialOfferRepository,
    ProcurementRepository,
    SupplierRepository,
)

router = APIRouter(prefix="/recommendations", tags=["Dashboard"])

DASHBOARD_LIMIT = 3


@router.get("", response_model=RecommendationsResponse)
def get_recommendations(store: MemoryStore = Depends(get_store)):
    """First three recommended suppliers, procurements and financial offers"""
    return {
        "suppliers": SupplierRepository.get_recommended(store)[:DASHBOARD_LIMIT],
        "procurements": ProcurementRepository.get_recommended(store)[:DASHBOARD_LIMIT],
        "financial_offers": FinancialOfferRepository.get_recommended(store)[:DASHBOARD_LIMIT],
    }
