"""
Catalog Domain - Repository Interfaces (Ports).

These are abstract interfaces that define how the domain reads the part catalog.
The actual implementations are in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from uuid import UUID

from .entities import Part


class PartCatalog(ABC):
    """Read access to the part catalog."""

    @abstractmethod
    def get_by_id(self, part_id: UUID) -> Optional[Part]:
        """Get part by ID."""

    @abstractmethod
    def find_by_ids(self, ids: Iterable[UUID]) -> List[Part]:
        """
        Get the parts that exist among ``ids``.

        Unknown ids are silently skipped; callers detect them by set difference.
        """

    @abstractmethod
    def find_by_product_type(self, product_type: str) -> List[Part]:
        """Get all parts tagged with a product type."""

    @abstractmethod
    def find_all(self) -> List[Part]:
        """Get every part in the catalog."""
