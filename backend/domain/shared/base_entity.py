"""
Identity base for catalog and assembly objects.

Two entities are the same object when their ids match, whatever their
other attributes say. Timestamps are always timezone-aware UTC.
"""

from __future__ import annotations
from abc import ABC
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(eq=False)
class Entity(ABC):
    """Anything with an id that survives changes to its attributes."""

    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def touch(self) -> None:
        """Mark the entity as modified now."""
        self.updated_at = utcnow()

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Entity) and other.id == self.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id}>"
