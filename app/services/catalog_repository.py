"""
Repository layer for the catalog collections: suppliers, procurement
opportunities, financial offers and learning resources.

The "recommended" reads return the whole collection. There is no ranking
behind them yet; callers treat them as a separate feed so one can be added
without touching the routes.
"""

from typing import List, Optional

from app.core.store import MemoryStore
from app.models import FinancialOffer, LearningResource, Procurement, Supplier
from app.schemas.catalog import (
    FinancialOfferCreate,
    LearningResourceCreate,
    ProcurementCreate,
    SupplierCreate,
)


class SupplierRepository:
    """Repository for Supplier operations"""

    @staticmethod
    def create(store: MemoryStore, supplier: SupplierCreate) -> Supplier:
        return store.suppliers.insert(**supplier.model_dump())

    @staticmethod
    def get_by_id(store: MemoryStore, supplier_id: int) -> Optional[Supplier]:
        return store.suppliers.get(supplier_id)

    @staticmethod
    def get_all(store: MemoryStore, category: Optional[str] = None) -> List[Supplier]:
        if category:
            return store.suppliers.list(lambda s: s.category == category)
        return store.suppliers.list()

    @staticmethod
    def get_recommended(store: MemoryStore) -> List[Supplier]:
        return store.suppliers.list()


class ProcurementRepository:
    """Repository for Procurement operations"""

    @staticmethod
    def create(store: MemoryStore, procurement: ProcurementCreate) -> Procurement:
        return store.procurements.insert(**procurement.model_dump())

    @staticmethod
    def get_by_id(store: MemoryStore, procurement_id: int) -> Optional[Procurement]:
        return store.procurements.get(procurement_id)

    @staticmethod
    def get_all(store: MemoryStore, category: Optional[str] = None) -> List[Procurement]:
        if category:
            return store.procurements.list(lambda p: p.category == category)
        return store.procurements.list()

    @staticmethod
    def get_recommended(store: MemoryStore) -> List[Procurement]:
        return store.procurements.list()


class FinancialOfferRepository:
    """Repository for FinancialOffer operations"""

    @staticmethod
    def create(store: MemoryStore, offer: FinancialOfferCreate) -> FinancialOffer:
        return store.financial_offers.insert(**offer.model_dump())

    @staticmethod
    def get_by_id(store: MemoryStore, offer_id: int) -> Optional[FinancialOffer]:
        return store.financial_offers.get(offer_id)

    @staticmethod
    def get_all(store: MemoryStore) -> List[FinancialOffer]:
        return store.financial_offers.list()

    @staticmethod
    def get_recommended(store: MemoryStore) -> List[FinancialOffer]:
        return store.financial_offers.list()


class LearningResourceRepository:
    """Repository for LearningResource operations"""

    @staticmethod
    def create(store: MemoryStore, resource: LearningResourceCreate) -> LearningResource:
        return store.learning_resources.insert(**resource.model_dump())

    @staticmethod
    def get_by_id(store: MemoryStore, resource_id: int) -> Optional[LearningResource]:
        return store.learning_resources.get(resource_id)

    @staticmethod
    def get_all(store: MemoryStore, level: Optional[str] = None) -> List[LearningResource]:
        if level:
            return store.learning_resources.list(lambda r: r.level == level)
        return store.learning_resources.list()

    @staticmethod
    def get_recommended(store: MemoryStore) -> List[LearningResource]:
        return store.learning_resources.list()
