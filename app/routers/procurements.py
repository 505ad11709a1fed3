"""
Procurement opportunity endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.core.store import MemoryStore, get_store
from app.schemas.catalog import ProcurementResponse
from app.services.catalog_repository import ProcurementRepository

router = APIRouter(prefix="/procurements", tags=["Procurements"])


@router.get("", response_model=List[ProcurementResponse])
def get_procurements(
    category: Optional[str] = Query(None),
    store: MemoryStore = Depends(get_store),
):
    return ProcurementRepository.get_all(store, category)


@router.get("/recommended", response_model=List[ProcurementResponse])
def get_recommended_procurements(store: MemoryStore = Depends(get_store)):
    return ProcurementRepository.get_recommended(store)


@router.get("/{procurement_id}", response_model=ProcurementResponse)
def get_procurement(procurement_id: int, store: MemoryStore = Depends(get_store)):
    procurement = ProcurementRepository.get_by_id(store, procurement_id)
    if not procurement:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Procurement not found"
        )
    return procurement
