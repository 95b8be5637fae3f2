"""
Catalog Serializers.

Serializers for base products and parts.
"""

from rest_framework import serializers

from domain.shared.value_objects import DEFAULT_PRODUCT_TYPE
from infrastructure.persistence.models import Part, Product
from .base import BaseModelSerializer, PriceField, require_text


class ProductSerializer(BaseModelSerializer):
    """Serializer for base products."""

    price = PriceField()
    type = serializers.CharField(
        max_length=100,
        required=False,
        default=DEFAULT_PRODUCT_TYPE,
    )
    restrictions = serializers.DictField(
        child=serializers.ListField(child=serializers.CharField()),
        required=False,
        allow_null=True,
    )

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'price', 'type',
            'is_available', 'restrictions',
            'created_at', 'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_name(self, value):
        return require_text(value, 'Name')


class PartSerializer(BaseModelSerializer):
    """
    Serializer for catalog parts.

    ``is_available`` is accepted but the stored value is forced to False
    whenever ``quantity`` is not positive.
    """

    price = PriceField()
    quantity = serializers.IntegerField(
        min_value=0,
        error_messages={'min_value': 'Quantity must be a non-negative integer'},
    )
    product_type = serializers.CharField(
        max_length=100,
        required=False,
        default=DEFAULT_PRODUCT_TYPE,
    )

    class Meta:
        model = Part
        fields = [
            'id', 'product_type', 'category', 'value',
            'price', 'quantity', 'is_available',
            'created_at', 'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
        # uniqueness is checked in validate() with a readable message
        validators = []

    def validate_category(self, value):
        return require_text(value, 'Category')

    def validate_value(self, value):
        return require_text(value, 'Value')

    def validate(self, attrs):
        instance = self.instance
        category = attrs.get('category', getattr(instance, 'category', None))
        value = attrs.get('value', getattr(instance, 'value', None))
        product_type = attrs.get(
            'product_type',
            getattr(instance, 'product_type', DEFAULT_PRODUCT_TYPE)
        )

        duplicates = Part.objects.filter(
            category=category,
            value=value,
            product_type=product_type,
        )
        if instance is not None:
            duplicates = duplicates.exclude(pk=instance.pk)
        if duplicates.exists():
            raise serializers.ValidationError(
                "Part with this category, value, and type already exists"
            )
        return attrs

