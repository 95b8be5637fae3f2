"""
Serializers Package.

All API serializers for the configurator.
"""

from .base import BaseModelSerializer, PriceField

from .catalog import (
    ProductSerializer,
    PartSerializer,
)

from .assembly import (
    CustomProductSerializer,
    CustomProductCreateSerializer,
    CustomProductUpdateSerializer,
    CustomProductPartsSerializer,
    PartReferenceSerializer,
)

__all__ = [
    'BaseModelSerializer',
    'PriceField',
    # Catalog
    'ProductSerializer',
    'PartSerializer',
    # Assembly
    'CustomProductSerializer',
    'CustomProductCreateSerializer',
    'CustomProductUpdateSerializer',
    'CustomProductPartsSerializer',
    'PartReferenceSerializer',
]
