"""
Domain Events.

Domain events are records of significant business occurrences.
They are broadcast to WebSocket subscribers after the change is committed.
"""

from __future__ import annotations
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Dict, List
from uuid import UUID, uuid4

from .base_entity import utcnow


_CAMEL_BOUNDARY = re.compile(r'(?<!^)(?=[A-Z])')


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """
    Base class for all domain events.

    Domain events are immutable records of something that happened in the domain.
    They are used for:
    - Triggering side effects (real-time notifications)
    - Audit trail
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=utcnow)

    @property
    def event_type(self) -> str:
        """Get the event type name."""
        return self.__class__.__name__

    @property
    def event_name(self) -> str:
        """Snake-case name used on the wire, e.g. ``part_created``."""
        return _CAMEL_BOUNDARY.sub('_', self.event_type).lower()

    def to_payload(self) -> Dict[str, Any]:
        """Serializable payload without the envelope fields."""
        payload = {}
        for f in fields(self):
            if f.name in ('event_id', 'occurred_at'):
                continue
            value = getattr(self, f.name)
            payload[f.name] = str(value) if isinstance(value, UUID) else value
        return payload


# =============================================================================
# CATALOG EVENTS
# =============================================================================

@dataclass(frozen=True, kw_only=True)
class PartCreated(DomainEvent):
    """Event raised when a part is added to the catalog."""

    part: Dict[str, Any]


@dataclass(frozen=True, kw_only=True)
class PartUpdated(DomainEvent):
    """Event raised when a catalog part changes."""

    part: Dict[str, Any]


@dataclass(frozen=True, kw_only=True)
class PartDeleted(DomainEvent):
    """Event raised when a part is removed from the catalog."""

    id: UUID


# =============================================================================
# CUSTOM PRODUCT EVENTS
# =============================================================================

@dataclass(frozen=True, kw_only=True)
class CustomProductCreated(DomainEvent):
    """Event raised when a custom product is assembled."""

    custom_product: Dict[str, Any]


@dataclass(frozen=True, kw_only=True)
class CustomProductUpdated(DomainEvent):
    """Event raised when name, price or product type change."""

    custom_product: Dict[str, Any]
    changes: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, kw_only=True)
class CustomProductPartsChanged(DomainEvent):
    """Event raised when parts are attached, detached or replaced."""

    custom_product: Dict[str, Any]


@dataclass(frozen=True, kw_only=True)
class CustomProductDeleted(DomainEvent):
    """Event raised when a custom product is deleted."""

    id: UUID


# =============================================================================
# PUBLISHING
# =============================================================================

class EventPublisher(ABC):
    """Port for broadcasting domain events once a change is committed."""

    @abstractmethod
    def publish(self, events: List[DomainEvent]) -> None:
        """Deliver events to subscribers, in order."""
