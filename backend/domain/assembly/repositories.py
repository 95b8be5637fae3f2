"""
Assembly Domain - Repository Interfaces (Ports).

The repository owns the custom product <-> part association and provides the
per-aggregate lock under which every validate-then-commit sequence runs.
"""

from abc import ABC, abstractmethod
from typing import ContextManager, Optional
from uuid import UUID

from .aggregates import CustomProduct


class CustomProductRepository(ABC):
    """Repository interface for the CustomProduct aggregate."""

    @abstractmethod
    def get_by_id(self, product_id: UUID) -> Optional[CustomProduct]:
        """Get a snapshot of a custom product by ID."""

    @abstractmethod
    def locked(self, product_id: UUID) -> ContextManager[CustomProduct]:
        """
        Load a custom product under an exclusive lock held for the block.

        Concurrent ``locked()`` blocks for the same id run one after another;
        different ids do not wait for each other. Raises
        EntityNotFoundException if the product does not exist.
        """

    @abstractmethod
    def add(self, product: CustomProduct) -> CustomProduct:
        """Persist a new custom product with its parts."""

    @abstractmethod
    def save(self, product: CustomProduct) -> CustomProduct:
        """Persist changes to a product loaded through ``locked()``."""

    @abstractmethod
    def delete(self, product_id: UUID) -> bool:
        """Delete a product and its part associations, never the parts."""
