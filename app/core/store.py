"""
In-memory storage engine.

Every entity family lives in its own table: a dict of records keyed by an
auto-incrementing integer id. Ids come from a per-table counter that only
moves forward, so deleted ids are never handed out again.

Metrics and storefronts belong to exactly one user each; their tables are
keyed by user id and expose an upsert instead of a plain insert.
"""

import dataclasses
import logging
import threading
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from fastapi import Request

from app.core.clock import utcnow
from app.core.exceptions import RecordNotFoundError
from app.models import (
    FinancialOffer,
    ForumPost,
    LearningResource,
    Metric,
    Procurement,
    Product,
    Storefront,
    Supplier,
    User,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Table(Generic[T]):
    """Records of one entity type keyed by their own id."""

    def __init__(self, name: str, record_type: Callable[..., T], timestamp_field: str = "created_at"):
        self.name = name
        self.record_type = record_type
        self.timestamp_field = timestamp_field
        self._rows: Dict[int, T] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    def _allocate_id(self) -> int:
        record_id = self._next_id
        self._next_id += 1
        return record_id

    def get(self, record_id: int) -> Optional[T]:
        return self._rows.get(record_id)

    def list(self, predicate: Optional[Callable[[T], bool]] = None) -> List[T]:
        rows = list(self._rows.values())
        if predicate is None:
            return rows
        return [row for row in rows if predicate(row)]

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        for row in list(self._rows.values()):
            if predicate(row):
                return row
        return None

    def insert(self, **fields: Any) -> T:
        with self._lock:
            fields.setdefault(self.timestamp_field, utcnow())
            record = self.record_type(id=self._allocate_id(), **fields)
            self._rows[record.id] = record
            return record

    def update(self, record_id: int, changes: Dict[str, Any]) -> T:
        """Shallow-merge ``changes`` into a record; omitted fields are kept."""
        with self._lock:
            existing = self._rows.get(record_id)
            if existing is None:
                raise RecordNotFoundError(self.name, record_id)
            updated = dataclasses.replace(existing, **changes)
            self._rows[record_id] = updated
            return updated

    def delete(self, record_id: int) -> bool:
        with self._lock:
            return self._rows.pop(record_id, None) is not None

    def count(self) -> int:
        return len(self._rows)

    def clear(self) -> None:
        with self._lock:
            self._rows.clear()


class UserKeyedTable(Table[T]):
    """
    Table holding at most one record per user.

    Rows are keyed by ``user_id``; each record still carries its own id from
    the table counter.
    """

    def get(self, record_id: int) -> Optional[T]:
        return self.find(lambda row: row.id == record_id)

    def get_for_user(self, user_id: int) -> Optional[T]:
        return self._rows.get(user_id)

    def insert(self, **fields: Any) -> T:
        with self._lock:
            user_id = fields["user_id"]
            if user_id in self._rows:
                raise ValueError(f"{self.name} for user {user_id} already exists")
            fields.setdefault(self.timestamp_field, utcnow())
            record = self.record_type(id=self._allocate_id(), **fields)
            self._rows[user_id] = record
            return record

    def update(self, record_id: int, changes: Dict[str, Any]) -> T:
        with self._lock:
            existing = self.get(record_id)
            if existing is None:
                raise RecordNotFoundError(self.name, record_id)
            return self.upsert(existing.user_id, {}, changes)

    def delete(self, record_id: int) -> bool:
        with self._lock:
            existing = self.get(record_id)
            if existing is None:
                return False
            del self._rows[existing.user_id]
            return True

    def upsert(
        self,
        user_id: int,
        defaults: Dict[str, Any],
        changes: Dict[str, Any],
        touch: bool = False,
    ) -> T:
        """
        Create the user's record from ``defaults`` + ``changes`` or merge
        ``changes`` into the existing one.

        With ``touch`` the timestamp field is refreshed on every write.
        """
        with self._lock:
            existing = self._rows.get(user_id)
            if existing is None:
                fields = {**defaults, **changes, "user_id": user_id}
                return self.insert(**fields)

            changes = dict(changes)
            changes.pop("user_id", None)
            if touch:
                changes[self.timestamp_field] = utcnow()
            updated = dataclasses.replace(existing, **changes)
            self._rows[user_id] = updated
            return updated


class MemoryStore:
    """Owns every table of the application for the lifetime of the process."""

    def __init__(self):
        self.users: Table[User] = Table("User", User)
        self.products: Table[Product] = Table("Product", Product)
        self.suppliers: Table[Supplier] = Table("Supplier", Supplier)
        self.procurements: Table[Procurement] = Table("Procurement", Procurement)
        self.financial_offers: Table[FinancialOffer] = Table("FinancialOffer", FinancialOffer)
        self.forum_posts: Table[ForumPost] = Table("ForumPost", ForumPost)
        self.learning_resources: Table[LearningResource] = Table("LearningResource", LearningResource)
        self.metrics: UserKeyedTable[Metric] = UserKeyedTable("Metric", Metric, timestamp_field="last_updated")
        self.storefronts: UserKeyedTable[Storefront] = UserKeyedTable("Storefront", Storefront)

    @property
    def tables(self) -> List[Table]:
        return [
            self.users,
            self.products,
            self.suppliers,
            self.procurements,
            self.financial_offers,
            self.forum_posts,
            self.learning_resources,
            self.metrics,
            self.storefronts,
        ]

    def close(self) -> None:
        """Drop every record. Id counters are left where they are."""
        for table in self.tables:
            table.clear()
        logger.info("In-memory store cleared")


def get_store(request: Request) -> MemoryStore:
    """Dependency returning the store created by the application lifespan."""
    return request.app.state.store
