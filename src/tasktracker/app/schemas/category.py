"""Category-related Pydantic schemas."""

from __future__ import annotations

from pydantic import ConfigDict, Field

from .base import ApiModel


class CategoryRequest(ApiModel):
    """Payload for creating or replacing a category."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"name": "Work", "description": "Tasks related to the day job."}
        }
    )

    name: str = Field(min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=500)


class CategoryRead(ApiModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None


__all__ = ["CategoryRead", "CategoryRequest"]
