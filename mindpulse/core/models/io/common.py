"""
Shared base for API I/O schemas.

The web client speaks camelCase JSON (``userId``, ``createdAt``) while the
Python side uses snake_case attributes. Schemas accept either spelling on
input and emit camelCase on output.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema with camelCase wire names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class SuccessResponse(CamelModel):
    success: bool = True
