"""WebSocket consumer and notification tasks."""

from channels.layers import get_channel_layer
from channels.testing import WebsocketCommunicator
import pytest

from application.tasks.notification_tasks import (
    CATALOG_GROUP,
    broadcast_event,
    check_part_availability,
)
from infrastructure.persistence.models import Part
from presentation.websocket.consumers import CatalogConsumer


@pytest.fixture
async def communicator():
    communicator = WebsocketCommunicator(CatalogConsumer.as_asgi(), '/ws/catalog/')
    connected, _ = await communicator.connect()
    assert connected
    yield communicator
    await communicator.disconnect()


async def test_ping(communicator):
    await communicator.send_json_to({'type': 'ping'})
    assert await communicator.receive_json_from() == {'type': 'pong'}


async def test_unknown_message_is_ignored(communicator):
    await communicator.send_json_to({'type': 'subscribe'})
    assert await communicator.receive_nothing()


async def test_group_event_is_forwarded(communicator):
    await get_channel_layer().group_send(CATALOG_GROUP, {
        'type': 'catalog.event',
        'event': 'part_deleted',
        'data': {'id': 'abc'},
        'timestamp': '2024-01-01T00:00:00+00:00',
    })

    assert await communicator.receive_json_from() == {
        'type': 'part_deleted',
        'data': {'id': 'abc'},
        'timestamp': '2024-01-01T00:00:00+00:00',
    }


def test_broadcast_event_sends_to_group(monkeypatch):
    sent = []

    class Layer:
        async def group_send(self, group, message):
            sent.append((group, message))

    monkeypatch.setattr(
        'application.tasks.notification_tasks.get_channel_layer', lambda: Layer()
    )

    result = broadcast_event.delay('part_created', {'part': {'id': '1'}}, 'now').get()

    assert result == {'success': True, 'event': 'part_created'}
    assert sent == [(CATALOG_GROUP, {
        'type': 'catalog.event',
        'event': 'part_created',
        'data': {'part': {'id': '1'}},
        'timestamp': 'now',
    })]


@pytest.mark.django_db
def test_check_part_availability_reports_breaches(create_part):
    create_part('wheels', 'road wheels', quantity=3)
    broken = create_part('chain', 'single-speed', quantity=2)
    # bypasses Part.save()
    Part.objects.filter(pk=broken.pk).update(quantity=0)

    assert check_part_availability.delay().get() == {'breaches': 1}


@pytest.mark.django_db
def test_check_part_availability_clean(create_part):
    create_part('chain', 'single-speed', quantity=0)
    assert check_part_availability() == {'breaches': 0}
