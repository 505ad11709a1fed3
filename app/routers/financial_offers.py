"""
Financing offer endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends

from app.core.store import MemoryStore, get_store
from app.schemas.catalog import FinancialOfferResponse
from app.services.catalog_repository import FinancialOfferRepository

router = APIRouter(prefix="/financial-offers", tags=["Financial Offers"])


@router.get("", response_model=List[FinancialOfferResponse])
def get_financial_offers(store: MemoryStore = Depends(get_store)):
    return FinancialOfferRepository.get_all(store)


@router.get("/recommended", response_model=List[FinancialOfferResponse])
def get_recommended_financial_offers(store: MemoryStore = Depends(get_store)):
    return FinancialOfferRepository.get_recommended(store)
