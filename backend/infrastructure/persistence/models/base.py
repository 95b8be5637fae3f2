"""
Abstract model shared by products, parts and custom products.

Rows are keyed by UUIDs so ids can be handed to API clients and WebSocket
subscribers without exposing insertion order.
"""

import uuid

from django.db import models


class CatalogModel(models.Model):
    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        verbose_name="ID"
    )
    created_at = models.DateTimeField(auto_now_add=True, verbose_name="Created at")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="Updated at")

    class Meta:
        abstract = True
