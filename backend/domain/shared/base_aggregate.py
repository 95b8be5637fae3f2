"""
Aggregate root base.

An aggregate root is the only object outside code may hold a reference to.
It carries a version counter bumped on every accepted change, and buffers
the domain events those changes produced until the application layer
pulls them after a successful save.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from .base_entity import Entity
from .events import DomainEvent


@dataclass(eq=False)
class AggregateRoot(Entity):
    version: int = 1
    _events: List[DomainEvent] = field(default_factory=list, repr=False)

    def bump_version(self) -> None:
        self.version += 1
        self.touch()

    def record_event(self, event: DomainEvent) -> None:
        self._events.append(event)

    def pull_events(self) -> List[DomainEvent]:
        """Return the buffered events and forget them."""
        events, self._events = self._events, []
        return events

    @property
    def pending_events(self) -> List[DomainEvent]:
        return list(self._events)
