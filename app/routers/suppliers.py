"""
Marketplace supplier catalog endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.core.store import MemoryStore, get_store
from app.schemas.catalog import SupplierResponse
from app.services.catalog_repository import SupplierRepository

router = APIRouter(prefix="/suppliers", tags=["Suppliers"])


@router.get("", response_model=List[SupplierResponse])
def get_suppliers(
    category: Optional[str] = Query(None),
    store: MemoryStore = Depends(get_store),
):
    return SupplierRepository.get_all(store, category)


@router.get("/recommended", response_model=List[SupplierResponse])
def get_recommended_suppliers(store: MemoryStore = Depends(get_store)):
    return SupplierRepository.get_recommended(store)


@router.get("/{supplier_id}", response_model=SupplierResponse)
def get_supplier(supplier_id: int, store: MemoryStore = Depends(get_store)):
    supplier = SupplierRepository.get_by_id(store, supplier_id)
    if not supplier:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Supplier not found"
        )
    return supplier
