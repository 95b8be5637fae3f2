"""
Assembly Serializers.

Serializers for custom products. Writes only validate the request shape;
compatibility is decided by the customization service.
"""

from decimal import Decimal

from rest_framework import serializers

from domain.shared.value_objects import DEFAULT_PRODUCT_TYPE
from infrastructure.persistence.models import CustomProduct
from .base import BaseModelSerializer, PriceField, require_text
from .catalog import PartSerializer


class CustomProductSerializer(BaseModelSerializer):
    """Read serializer for custom products with their parts."""

    parts = serializers.SerializerMethodField()
    parts_price = serializers.SerializerMethodField()

    class Meta:
        model = CustomProduct
        fields = [
            'id', 'name', 'price', 'product_type', 'version',
            'parts', 'parts_price',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields

    def _parts(self, obj):
        return [link.part for link in obj.part_links.all()]

    def get_parts(self, obj):
        return PartSerializer(self._parts(obj), many=True).data

    def get_parts_price(self, obj) -> str:
        total = sum((part.price for part in self._parts(obj)), Decimal('0.00'))
        return f"{total:.2f}"


class CustomProductCreateSerializer(serializers.Serializer):
    """Input for creating a custom product."""

    name = serializers.CharField(max_length=255)
    price = PriceField()
    product_type = serializers.CharField(
        max_length=100,
        required=False,
        default=DEFAULT_PRODUCT_TYPE,
    )
    parts = serializers.ListField(
        child=serializers.UUIDField(),
        required=False,
        allow_empty=True,
        help_text='Part IDs to attach',
    )

    def validate_name(self, value):
        return require_text(value, 'Name')

    def validate_product_type(self, value):
        return require_text(value, 'product_type')


class CustomProductUpdateSerializer(serializers.Serializer):
    """Input for updating name, price and/or product type."""

    name = serializers.CharField(max_length=255, required=False)
    price = PriceField('Price must be a positive number', required=False)
    product_type = serializers.CharField(max_length=100, required=False)

    def validate_name(self, value):
        return require_text(value, 'Name')

    def validate_product_type(self, value):
        return require_text(value, 'product_type')

    def validate(self, attrs):
        if not attrs:
            raise serializers.ValidationError(
                "At least one field (name, price, product_type) is required."
            )
        return attrs


class CustomProductPartsSerializer(serializers.Serializer):
    """Input for replacing every part of a custom product."""

    parts = serializers.ListField(
        child=serializers.UUIDField(),
        allow_empty=False,
        error_messages={
            'empty': 'Parts array is required and cannot be empty.',
            'required': 'Parts array is required and cannot be empty.',
        },
    )


class PartReferenceSerializer(serializers.Serializer):
    """Input naming one part to attach or detach."""

    part = serializers.UUIDField()
