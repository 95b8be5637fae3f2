"""
WebSocket Routing.
"""

from django.urls import re_path

from .consumers import CatalogConsumer

websocket_urlpatterns = [
    re_path(r'ws/catalog/$', CatalogConsumer.as_asgi()),
]
