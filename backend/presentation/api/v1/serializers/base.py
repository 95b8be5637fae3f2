"""
Base Serializers.

Shared field types and the common model serializer configuration.
"""

from decimal import Decimal

from rest_framework import serializers


class BaseModelSerializer(serializers.ModelSerializer):
    """Model serializer whose id and timestamps are never writable."""

    class Meta:
        abstract = True
        read_only_fields = ['id', 'created_at', 'updated_at']


class PriceField(serializers.DecimalField):
    """Non-negative money amount with two decimal places."""

    def __init__(self, message='Price must be a positive float', **kwargs):
        kwargs.setdefault('max_digits', 12)
        kwargs.setdefault('decimal_places', 2)
        kwargs.setdefault('min_value', Decimal('0'))
        kwargs.setdefault('error_messages', {'min_value': message})
        super().__init__(**kwargs)


def require_text(value: str, label: str) -> str:
    """Reject blank strings with a field-specific message."""
    value = (value or '').strip()
    if not value:
        raise serializers.ValidationError(f"{label} is required")
    return value
