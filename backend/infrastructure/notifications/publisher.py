"""
Event Publisher.

Hands domain events to the broadcast Celery task once the surrounding
database transaction commits, so subscribers never see rolled-back changes.
"""

from functools import partial
from typing import List
import logging

from django.db import transaction

from application.tasks.notification_tasks import broadcast_event
from domain.shared.events import DomainEvent, EventPublisher

logger = logging.getLogger(__name__)


class CeleryEventPublisher(EventPublisher):
    """Publishes events to the ``catalog`` WebSocket group via Celery."""

    def publish(self, events: List[DomainEvent]) -> None:
        for event in events:
            logger.debug(f"Scheduling {event.event_name} ({event.event_id})")
            transaction.on_commit(
                partial(
                    broadcast_event.delay,
                    event.event_name,
                    event.to_payload(),
                    event.occurred_at.isoformat(),
                ),
                robust=True,
            )
