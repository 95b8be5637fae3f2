"""
Persistence Models Package.

All Django ORM models for the configurator.
"""

from .base import CatalogModel

# Catalog models
from .catalog import (
    Product,
    Part,
)

# Assembly models
from .assembly import (
    CustomProduct,
    CustomProductPart,
)


__all__ = [
    'CatalogModel',

    # Catalog
    'Product',
    'Part',

    # Assembly
    'CustomProduct',
    'CustomProductPart',
]
