"""
Error types raised below the route layer.

Routers translate these into HTTP responses through the handlers registered
in main.py; nothing under app/services knows about status codes.
"""


class StoreError(Exception):
    """Base class for in-memory store failures."""


class RecordNotFoundError(StoreError):
    """Raised when an update targets a record that does not exist."""

    def __init__(self, entity: str, key: int):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} with id {key} not found")
