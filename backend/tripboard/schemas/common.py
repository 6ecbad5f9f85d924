"""
Shared pydantic configuration for request and response schemas.
"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

# Largest value a signed 64-bit integer primary key can hold
MAX_ID = 2 ** 63 - 1


class CamelModel(BaseModel):
    """Response schema serialized with camelCase keys."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class RequestModel(BaseModel):
    """Request body schema: camelCase or snake_case keys, unknown keys rejected."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "forbid"


class SuccessResponse(BaseModel):
    success: bool = True


def reject_nulls(values: dict, fields) -> None:
    """Raise ValueError if any of ``fields`` was explicitly sent as null."""
    for field in fields:
        if field in values and values[field] is None:
            raise ValueError(f"{field} cannot be null")
