"""
Shared base schemas.

The API speaks camelCase JSON while the Python side uses snake_case, so every
schema generates camelCase aliases and also accepts field names.
"""

from typing import Any, ClassVar, Tuple

from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema with camelCase aliases."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class PartialUpdate(CamelModel):
    """
    Base schema for partial updates.

    Every field is optional, but fields listed in ``non_nullable`` may only be
    omitted, never sent as null.
    """

    non_nullable: ClassVar[Tuple[str, ...]] = ()

    @field_validator("*")
    @classmethod
    def reject_null(cls, value: Any, info) -> Any:
        if value is None and info.field_name in cls.non_nullable:
            raise ValueError(f"{info.field_name} may not be null")
        return value
