"""
Repository layer for storefront products.
"""

from typing import List, Optional

from app.core.store import MemoryStore
from app.models import Product
from app.schemas.product import ProductCreate, ProductUpdate


class ProductRepository:
    """Repository for Product operations"""

    @staticmethod
    def create(store: MemoryStore, product: ProductCreate) -> Product:
        """Create a new product"""
        return store.products.insert(**product.model_dump())

    @staticmethod
    def get_by_id(store: MemoryStore, product_id: int) -> Optional[Product]:
        """Get product by ID"""
        return store.products.get(product_id)

    @staticmethod
    def get_all(store: MemoryStore, user_id: Optional[int] = None) -> List[Product]:
        """Get all products, optionally only those owned by one user"""
        if user_id is None:
            return store.products.list()
        return store.products.list(lambda p: p.user_id == user_id)

    @staticmethod
    def update(store: MemoryStore, product_id: int, product_update: ProductUpdate) -> Product:
        """
        Update product.

        Only fields present in the request are changed. Raises
        RecordNotFoundError when the product does not exist.
        """
        update_data = product_update.model_dump(exclude_unset=True)
        return store.products.update(product_id, update_data)

    @staticmethod
    def delete(store: MemoryStore, product_id: int) -> bool:
        """Delete product (hard delete)"""
        return store.products.delete(product_id)
