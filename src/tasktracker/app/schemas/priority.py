"""Priority-related Pydantic schemas."""

from __future__ import annotations

from pydantic import ConfigDict, Field

from .base import ApiModel


class PriorityRequest(ApiModel):
    """Payload for creating or replacing a priority."""

    model_config = ConfigDict(json_schema_extra={"example": {"name": "High", "level": 3}})

    name: str = Field(min_length=1, max_length=255)
    level: int | None = Field(default=None)


class PriorityRead(ApiModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    level: int | None = None


__all__ = ["PriorityRead", "PriorityRequest"]
