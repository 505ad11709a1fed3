"""
Repository layer for the per-user dashboard records: metrics and storefront
setup progress.

Both are upserts keyed by user id: the first write creates the record,
later writes merge into it.
"""

from typing import Optional

from app.core.store import MemoryStore
from app.models import Metric, SetupSteps, Storefront
from app.schemas.metric import MetricUpdate
from app.schemas.storefront import StorefrontUpdate

METRIC_DEFAULTS = {
    "store_visits": 0,
    "orders": 0,
    "connections": 0,
    "revenue": 0,
}


class MetricsRepository:
    """Repository for Metric operations"""

    @staticmethod
    def get(store: MemoryStore, user_id: int) -> Optional[Metric]:
        return store.metrics.get_for_user(user_id)

    @staticmethod
    def update(store: MemoryStore, user_id: int, metrics_update: MetricUpdate) -> Metric:
        """Create or update the user's metrics; lastUpdated is refreshed on every write"""
        changes = metrics_update.model_dump(exclude_unset=True)
        return store.metrics.upsert(user_id, METRIC_DEFAULTS, changes, touch=True)


class StorefrontRepository:
    """Repository for Storefront operations"""

    @staticmethod
    def get(store: MemoryStore, user_id: int) -> Optional[Storefront]:
        return store.storefronts.get_for_user(user_id)

    @staticmethod
    def update(store: MemoryStore, user_id: int, storefront_update: StorefrontUpdate) -> Storefront:
        """
        Create or update the user's storefront.

        A new storefront starts at 0% with only the basic info step done,
        unless the request says otherwise. The stored percentage is taken from
        the request as is.
        """
        changes = storefront_update.model_dump(exclude_unset=True)
        if "setup_steps" in changes:
            changes["setup_steps"] = SetupSteps(**changes["setup_steps"])

        defaults = {"completion_percentage": 0, "setup_steps": SetupSteps()}
        return store.storefronts.upsert(user_id, defaults, changes)

    @staticmethod
    def get_progress(store: MemoryStore, user_id: int) -> int:
        storefront = store.storefronts.get_for_user(user_id)
        return storefront.completion_percentage if storefront else 0
