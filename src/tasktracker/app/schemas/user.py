"""User-facing Pydantic schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import ConfigDict, EmailStr, Field, field_validator

from .base import ApiModel, ensure_utc


class UserRequest(ApiModel):
    """Payload for creating or replacing a user."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"name": "Ada Lovelace", "email": "ada@example.com"}}
    )

    name: str = Field(min_length=1, max_length=255)
    email: EmailStr


class UserRead(ApiModel):
    """Public representation of a user."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)


__all__ = ["UserRead", "UserRequest"]
