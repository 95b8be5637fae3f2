"""
WebSocket Consumers.

Every client joins the single ``catalog`` group. Events reach the group via
the ``broadcast_event`` Celery task once the change that caused them has
been committed, so a client never sees a change that was rolled back.
"""

import logging

from channels.generic.websocket import AsyncJsonWebsocketConsumer

from application.tasks.notification_tasks import CATALOG_GROUP

logger = logging.getLogger(__name__)


class CatalogConsumer(AsyncJsonWebsocketConsumer):
    """
    Pushes part and custom product changes to connected clients.

    Outgoing frames look like ``{"type": "part_updated", "data": {...},
    "timestamp": "..."}``. The only message a client may send is
    ``{"type": "ping"}``, answered with ``{"type": "pong"}``.
    """

    groups = [CATALOG_GROUP]

    async def connect(self):
        await self.accept()
        logger.debug(f"Client {self.channel_name} subscribed to catalog events")

    async def receive_json(self, content):
        if content.get('type') == 'ping':
            await self.send_json({'type': 'pong'})

    async def catalog_event(self, event):
        """Handler for ``catalog.event`` group messages."""
        await self.send_json({
            'type': event['event'],
            'data': event['data'],
            'timestamp': event.get('timestamp'),
        })
