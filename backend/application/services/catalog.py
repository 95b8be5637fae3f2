"""
Catalog Service.

Read-side use cases over the part catalog.
"""

from typing import Dict, Iterable, List, Optional

from domain.catalog.entities import Part
from domain.catalog.repositories import PartCatalog


PartOptions = Dict[str, Dict[str, List[str]]]


def build_part_options(parts: Iterable[Part]) -> PartOptions:
    """
    Group parts into ``{product_type: {category: [values]}}``.

    Values are distinct and keep catalog order.
    """
    options: PartOptions = {}
    for part in parts:
        values = options.setdefault(part.product_type, {}).setdefault(part.category, [])
        if part.value not in values:
            values.append(part.value)
    return options


class CatalogService:
    """Queries the assembly UI needs from the part catalog."""

    def __init__(self, catalog: PartCatalog):
        self.catalog = catalog

    def part_options(self, product_type: Optional[str] = None) -> PartOptions:
        """Options for every product type, or for a single one."""
        if product_type:
            parts = self.catalog.find_by_product_type(product_type)
        else:
            parts = self.catalog.find_all()
        return build_part_options(parts)
