"""Database related helpers."""

from __future__ import annotations

from .base import metadata
from .session import Database, enable_sqlite_foreign_keys

__all__ = ["Database", "enable_sqlite_foreign_keys", "metadata"]
