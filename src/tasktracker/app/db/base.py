"""Metadata registry used by migrations and schema bootstrap."""

from __future__ import annotations

from sqlmodel import SQLModel

from .. import models  # noqa: F401  # registers every table on SQLModel.metadata

metadata = SQLModel.metadata

__all__ = ["SQLModel", "metadata"]
