"""Result values returned when resolving records by identifier."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Found(Generic[T]):
    """A successfully resolved record."""

    value: T


@dataclass(frozen=True, slots=True)
class NotFound:
    """Signals that no record of ``kind`` exists with identifier ``id``."""

    kind: str
    id: int

    @property
    def message(self) -> str:
        return f"{self.kind} not found with id: {self.id}"


Resolution = Union[Found[T], NotFound]


__all__ = ["Found", "NotFound", "Resolution"]
