"""
Catalog Domain - Entities.

Parts are the interchangeable pieces a custom product is assembled from.
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict

from domain.shared.base_entity import Entity
from domain.shared.exceptions import ValidationException
from domain.shared.value_objects import DEFAULT_PRODUCT_TYPE, to_price


@dataclass(eq=False)
class Part(Entity):
    """
    A catalog part, e.g. ``wheels = "mountain wheels"`` for a bicycle.

    ``is_available`` is forced to False whenever ``quantity`` is not positive;
    it may also be False with stock left (manual deactivation).
    """

    product_type: str = DEFAULT_PRODUCT_TYPE
    category: str = ""
    value: str = ""
    price: Decimal = Decimal("0.00")
    quantity: int = 0
    is_available: bool = True

    def __post_init__(self):
        if not self.category:
            raise ValidationException("Category is required", "category")
        if not self.value:
            raise ValidationException("Value is required", "value")
        if not self.product_type:
            raise ValidationException("Product type is required", "product_type")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValidationException(
                "Quantity must be an integer", "quantity", self.quantity
            )
        if self.quantity < 0:
            raise ValidationException(
                "Quantity must be a non-negative integer", "quantity", self.quantity
            )
        self.price = to_price(self.price)
        self._sync_availability()

    @property
    def in_stock(self) -> bool:
        return self.quantity > 0

    def _sync_availability(self) -> None:
        if self.quantity <= 0:
            self.is_available = False

    def restock(self, quantity: int) -> None:
        """Set the stock level, re-deriving availability."""
        if quantity < 0:
            raise ValidationException(
                "Quantity must be a non-negative integer", "quantity", quantity
            )
        self.quantity = quantity
        self._sync_availability()
        self.touch()

    def set_available(self, is_available: bool) -> None:
        """Toggle availability; cannot be switched on without stock."""
        self.is_available = is_available
        self._sync_availability()
        self.touch()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "product_type": self.product_type,
            "category": self.category,
            "value": self.value,
            "price": str(self.price),
            "quantity": self.quantity,
            "is_available": self.is_available,
        }

