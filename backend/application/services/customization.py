"""
Customization Service.

Use cases for custom products. Every mutation runs under the repository's
per-product lock so that validation and commit happen as one step, then the
pending domain events are published.
"""

import logging
from typing import Any, Iterable, List, Optional
from uuid import UUID

from domain.assembly.aggregates import CustomProduct
from domain.assembly.exceptions import (
    AssemblyViolationException,
    IncompatiblePartsException,
)
from domain.assembly.repositories import CustomProductRepository
from domain.assembly.validator import AssemblyValidator
from domain.catalog.entities import Part
from domain.catalog.repositories import PartCatalog
from domain.shared.events import EventPublisher
from domain.shared.exceptions import (
    EntityNotFoundException,
    PartsNotFoundException,
    ValidationException,
)
from domain.shared.value_objects import DEFAULT_PRODUCT_TYPE

logger = logging.getLogger(__name__)


class CustomizationService:
    """Application service for creating and changing custom products."""

    def __init__(
        self,
        catalog: PartCatalog,
        repository: CustomProductRepository,
        publisher: EventPublisher,
        validator: Optional[AssemblyValidator] = None,
    ):
        self.catalog = catalog
        self.repository = repository
        self.publisher = publisher
        self.validator = validator or AssemblyValidator()

    # =========================================================================
    # QUERIES
    # =========================================================================

    def get(self, product_id: UUID) -> CustomProduct:
        product = self.repository.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundException("CustomProduct", product_id)
        return product

    # =========================================================================
    # COMMANDS
    # =========================================================================

    def create(
        self,
        name: str,
        price: Any,
        product_type: str = DEFAULT_PRODUCT_TYPE,
        part_ids: Optional[Iterable[UUID]] = None,
    ) -> CustomProduct:
        """Create a custom product, optionally with an initial part list."""
        parts = self._resolve_parts(part_ids) if part_ids else []
        try:
            product = CustomProduct.assemble(
                name=name,
                price=price,
                product_type=product_type,
                parts=parts,
                validator=self.validator,
            )
        except AssemblyViolationException as e:
            logger.info(f"Rejected new {product_type} '{name}': {e.message}")
            raise

        self.repository.add(product)
        logger.info(
            f"Custom product {product.id} created ({product_type}, {len(parts)} parts)"
        )
        self._publish(product)
        return product

    def update(
        self,
        product_id: UUID,
        name: Optional[str] = None,
        price: Any = None,
        product_type: Optional[str] = None,
    ) -> CustomProduct:
        """Update descriptive fields; a type change is validated against the parts."""
        with self.repository.locked(product_id) as product:
            try:
                changes = product.update_details(
                    self.validator,
                    name=name,
                    price=price,
                    product_type=product_type,
                )
            except IncompatiblePartsException as e:
                logger.info(
                    f"Rejected type change of {product_id} to '{e.new_type}': "
                    f"{len(e.incompatible_parts)} incompatible parts"
                )
                raise
            if changes:
                self.repository.save(product)
                logger.info(f"Custom product {product_id} updated: {sorted(changes)}")
        self._publish(product)
        return product

    def replace_parts(self, product_id: UUID, part_ids: Iterable[UUID]) -> CustomProduct:
        """Replace every part of a custom product."""
        part_ids = list(part_ids or [])
        if not part_ids:
            raise ValidationException(
                "Parts array is required and cannot be empty.", "parts"
            )

        with self.repository.locked(product_id) as product:
            parts = self._resolve_parts(part_ids)
            try:
                product.replace_parts(parts, self.validator)
            except AssemblyViolationException as e:
                logger.info(f"Rejected part replacement on {product_id}: {e.message}")
                raise
            self.repository.save(product)
            logger.info(f"Custom product {product_id} parts replaced ({len(parts)} parts)")
        self._publish(product)
        return product

    def attach_part(self, product_id: UUID, part_id: UUID) -> CustomProduct:
        """Attach one part, swapping out the part already in its category."""
        with self.repository.locked(product_id) as product:
            part = self._get_part(part_id)
            try:
                replaced = product.attach_part(part, self.validator)
            except AssemblyViolationException as e:
                logger.info(f"Rejected {part.category} part {part_id} on {product_id}: {e.message}")
                raise
            self.repository.save(product)
            if replaced is not None:
                logger.info(
                    f"Custom product {product_id}: {part.category} "
                    f"'{replaced.value}' -> '{part.value}'"
                )
            else:
                logger.info(f"Custom product {product_id}: attached {part.category} '{part.value}'")
        self._publish(product)
        return product

    def detach_part(self, product_id: UUID, part_id: UUID) -> CustomProduct:
        """Detach one part."""
        with self.repository.locked(product_id) as product:
            part = product.detach_part(part_id)
            self.repository.save(product)
            logger.info(f"Custom product {product_id}: detached {part.category} '{part.value}'")
        self._publish(product)
        return product

    def delete(self, product_id: UUID) -> None:
        """Delete a custom product; its parts stay in the catalog."""
        with self.repository.locked(product_id) as product:
            product.mark_deleted()
            self.repository.delete(product_id)
            logger.info(f"Custom product {product_id} deleted")
        self._publish(product)

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _resolve_parts(self, part_ids: Iterable[UUID]) -> List[Part]:
        """Load parts in request order; any unknown id is a referential error."""
        requested = list(dict.fromkeys(part_ids))
        found = {part.id: part for part in self.catalog.find_by_ids(requested)}
        missing = [part_id for part_id in requested if part_id not in found]
        if missing:
            raise PartsNotFoundException(missing)
        return [found[part_id] for part_id in requested]

    def _get_part(self, part_id: UUID) -> Part:
        part = self.catalog.get_by_id(part_id)
        if part is None:
            raise EntityNotFoundException("Part", part_id)
        return part

    def _publish(self, product: CustomProduct) -> None:
        events = product.pull_events()
        if events:
            self.publisher.publish(events)
