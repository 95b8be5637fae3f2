"""
Notification Tasks.

Celery tasks for real-time notifications and catalog consistency checks.
"""

from asgiref.sync import async_to_sync
from celery import shared_task
from channels.layers import get_channel_layer
import logging

logger = logging.getLogger(__name__)

CATALOG_GROUP = 'catalog'


@shared_task(bind=True, max_retries=3, default_retry_delay=2)
def broadcast_event(self, event_name: str, payload: dict, timestamp: str = None):
    """
    Push a catalog event to every WebSocket subscriber.

    Args:
        event_name: snake_case event name, e.g. ``part_created``
        payload: JSON-serializable event data
        timestamp: ISO timestamp of the change
    """
    channel_layer = get_channel_layer()
    if channel_layer is None:
        logger.warning(f"No channel layer configured, dropping {event_name}")
        return {'success': False, 'error': 'no channel layer'}

    try:
        async_to_sync(channel_layer.group_send)(
            CATALOG_GROUP,
            {
                'type': 'catalog.event',
                'event': event_name,
                'data': payload,
                'timestamp': timestamp,
            }
        )
    except Exception as e:
        logger.error(f"Failed to broadcast {event_name}: {e}")
        raise self.retry(exc=e)

    logger.debug(f"Broadcast {event_name}")
    return {'success': True, 'event': event_name}


@shared_task
def check_part_availability():
    """
    Report parts that are marked available without stock.

    Every write path forces ``is_available`` off when stock runs out, so a hit
    here means a write bypassed the model (bulk update, raw SQL).
    """
    from infrastructure.persistence.models import Part

    breaches = Part.objects.filter(is_available=True, quantity__lte=0)

    count = 0
    for part in breaches.iterator():
        logger.error(
            f"Part {part.id} ({part.product_type}/{part.category}={part.value}) "
            f"is available with quantity {part.quantity}"
        )
        count += 1

    if count == 0:
        logger.info("Part availability check passed")
    return {'breaches': count}
