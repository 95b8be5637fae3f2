"""
Assembly Domain - Aggregates.

CustomProduct is the aggregate root for a user-assembled product.
Every change to its type or parts goes through the AssemblyValidator and is
all-or-nothing: a rejected command leaves the aggregate untouched.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Tuple
from uuid import UUID

from domain.catalog.entities import Part
from domain.shared.base_aggregate import AggregateRoot
from domain.shared.events import (
    CustomProductCreated,
    CustomProductDeleted,
    CustomProductPartsChanged,
    CustomProductUpdated,
)
from domain.shared.exceptions import (
    InvalidOperationException,
    ValidationException,
)
from domain.shared.value_objects import DEFAULT_PRODUCT_TYPE, to_price

from .exceptions import AssemblyViolationException, IncompatiblePartsException
from .validator import AssemblyValidator


@dataclass(eq=False)
class CustomProduct(AggregateRoot):
    """
    Aggregate root for custom products.

    Holds the declared product type and the attached parts. The parts are a
    snapshot of catalog parts taken when the aggregate was loaded.
    """

    name: str = ""
    price: Decimal = Decimal("0.00")
    product_type: str = DEFAULT_PRODUCT_TYPE
    _parts: List[Part] = field(default_factory=list)

    def __post_init__(self):
        if not self.name:
            raise ValidationException("Name is required", "name")
        if not self.product_type:
            raise ValidationException("Product type is required", "product_type")
        self.price = to_price(self.price)

    # =========================================================================
    # FACTORY
    # =========================================================================

    @classmethod
    def assemble(
        cls,
        name: str,
        price: Any,
        product_type: str,
        parts: Iterable[Part] = (),
        validator: Optional[AssemblyValidator] = None,
    ) -> CustomProduct:
        """Create a custom product, validating the initial parts if any."""
        product = cls(name=name, price=price, product_type=product_type)
        parts = list(parts)
        if parts:
            product._check(
                (validator or AssemblyValidator()).validate_replace_all(product, parts)
            )
            product._parts = parts
        product.record_event(CustomProductCreated(custom_product=product.to_dict()))
        return product

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def parts(self) -> Tuple[Part, ...]:
        return tuple(self._parts)

    @property
    def part_ids(self) -> FrozenSet[UUID]:
        return frozenset(part.id for part in self._parts)

    @property
    def parts_price(self) -> Decimal:
        """Sum of the attached parts' catalog prices."""
        return sum((part.price for part in self._parts), Decimal("0.00"))

    def part_in(self, category: str) -> Optional[Part]:
        for part in self._parts:
            if part.category == category:
                return part
        return None

    # =========================================================================
    # COMMANDS
    # =========================================================================

    def attach_part(self, part: Part, validator: AssemblyValidator) -> Optional[Part]:
        """
        Attach a part, swapping out any part in the same category.

        Returns the part that was swapped out, if any.
        """
        self._check(validator.validate_attach(self, part))

        replaced = self.part_in(part.category)
        self._parts = [
            p for p in self._parts
            if p.category != part.category and p.id != part.id
        ]
        self._parts.append(part)
        self._parts_changed()
        return replaced

    def detach_part(self, part_id: UUID) -> Part:
        """Detach a part; detaching never breaks a compatibility rule."""
        for index, part in enumerate(self._parts):
            if part.id == part_id:
                del self._parts[index]
                self._parts_changed()
                return part
        raise InvalidOperationException(
            f"Part '{part_id}' is not attached to this custom product"
        )

    def replace_parts(self, parts: Iterable[Part], validator: AssemblyValidator) -> None:
        """Replace the whole part set."""
        parts = list(parts)
        if not parts:
            raise ValidationException(
                "Parts array is required and cannot be empty.", "parts"
            )
        self._check(validator.validate_replace_all(self, parts))
        self._parts = parts
        self._parts_changed()

    def _change_product_type(self, new_type: str, validator: AssemblyValidator) -> bool:
        """
        Change the declared product type.

        Allowed only when every attached part matches the new type.
        Returns False when the type is unchanged.
        """
        if not new_type:
            raise ValidationException("Product type is required", "product_type")
        if new_type == self.product_type:
            return False
        incompatible = validator.validate_type_change(self, new_type)
        if incompatible:
            raise IncompatiblePartsException(new_type, incompatible)
        self.product_type = new_type
        return True

    def update_details(
        self,
        validator: AssemblyValidator,
        name: Optional[str] = None,
        price: Any = None,
        product_type: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Update name, price and/or product type in one step.

        Returns the applied changes.
        """
        if name is None and price is None and product_type is None:
            raise ValidationException(
                "At least one field (name, price, product_type) is required."
            )
        if name is not None and not name:
            raise ValidationException("Name is required", "name")
        new_price = to_price(price) if price is not None else None

        changes: Dict[str, Any] = {}
        if product_type is not None and self._change_product_type(product_type, validator):
            changes["product_type"] = product_type
        if name is not None and name != self.name:
            self.name = name
            changes["name"] = name
        if new_price is not None and new_price != self.price:
            self.price = new_price
            changes["price"] = str(new_price)

        if changes:
            self.bump_version()
            self.record_event(CustomProductUpdated(
                custom_product=self.to_dict(),
                changes=changes,
            ))
        return changes

    def mark_deleted(self) -> None:
        self.record_event(CustomProductDeleted(id=self.id))

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _check(self, violation) -> None:
        if violation is not None:
            raise AssemblyViolationException(violation)

    def _parts_changed(self) -> None:
        self.bump_version()
        self.record_event(CustomProductPartsChanged(custom_product=self.to_dict()))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "name": self.name,
            "price": str(self.price),
            "product_type": self.product_type,
            "version": self.version,
            "parts": [part.to_dict() for part in self._parts],
        }
