"""
API Router for storefront products.
Full CRUD operations for a user's product listings.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.core.store import MemoryStore, get_store
from app.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from app.services.product_repository import ProductRepository

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=List[ProductResponse])
def get_products(
    user_id: int = Query(..., alias="userId", description="Owner user ID"),
    store: MemoryStore = Depends(get_store),
):
    """Get all products owned by a user"""
    return ProductRepository.get_all(store, user_id)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(product: ProductCreate, store: MemoryStore = Depends(get_store)):
    """Create a new product"""
    return ProductRepository.create(store, product)


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(product_id: int, store: MemoryStore = Depends(get_store)):
    """Get product by ID"""
    product = ProductRepository.get_by_id(store, product_id)
    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found"
        )
    return product


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: int,
    product_update: ProductUpdate,
    store: MemoryStore = Depends(get_store),
):
    """
    Update a product.

    Only the fields present in the body change. A missing product surfaces as
    RecordNotFoundError and is answered with 404.
    """
    return ProductRepository.update(store, product_id, product_update)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: int, store: MemoryStore = Depends(get_store)):
    """Delete a product"""
    if not ProductRepository.delete(store, product_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found"
        )
    return None
