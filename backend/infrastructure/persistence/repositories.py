"""
Django Repository Implementations.

Adapters between the ORM models and the domain ports.
"""

from contextlib import contextmanager
from typing import Iterable, Iterator, List, Optional
from uuid import UUID

from django.db import transaction

from domain.assembly.aggregates import CustomProduct
from domain.assembly.repositories import CustomProductRepository
from domain.catalog.entities import Part
from domain.catalog.repositories import PartCatalog
from domain.shared.exceptions import EntityNotFoundException

from . import models


def part_to_domain(row: models.Part) -> Part:
    return Part(
        id=row.id,
        created_at=row.created_at,
        updated_at=row.updated_at,
        product_type=row.product_type,
        category=row.category,
        value=row.value,
        price=row.price,
        quantity=row.quantity,
        is_available=row.is_available,
    )


def custom_product_to_domain(row: models.CustomProduct) -> CustomProduct:
    links = row.part_links.select_related('part').order_by('position')
    return CustomProduct(
        id=row.id,
        created_at=row.created_at,
        updated_at=row.updated_at,
        version=row.version,
        name=row.name,
        price=row.price,
        product_type=row.product_type,
        _parts=[part_to_domain(link.part) for link in links],
    )


class DjangoPartCatalog(PartCatalog):
    """Part catalog backed by the ``parts`` table."""

    def get_by_id(self, part_id: UUID) -> Optional[Part]:
        row = models.Part.objects.filter(pk=part_id).first()
        return part_to_domain(row) if row else None

    def find_by_ids(self, ids: Iterable[UUID]) -> List[Part]:
        return [
            part_to_domain(row)
            for row in models.Part.objects.filter(pk__in=list(ids))
        ]

    def find_by_product_type(self, product_type: str) -> List[Part]:
        return [
            part_to_domain(row)
            for row in models.Part.objects.filter(product_type=product_type)
        ]

    def find_all(self) -> List[Part]:
        return [part_to_domain(row) for row in models.Part.objects.all()]


class DjangoCustomProductRepository(CustomProductRepository):
    """
    Custom product repository backed by ``custom_products``.

    ``locked()`` takes a row lock with SELECT ... FOR UPDATE inside a
    transaction, serializing writers of the same product.
    """

    def get_by_id(self, product_id: UUID) -> Optional[CustomProduct]:
        row = models.CustomProduct.objects.filter(pk=product_id).first()
        return custom_product_to_domain(row) if row else None

    @contextmanager
    def locked(self, product_id: UUID) -> Iterator[CustomProduct]:
        with transaction.atomic():
            row = (
                models.CustomProduct.objects
                .select_for_update()
                .filter(pk=product_id)
                .first()
            )
            if row is None:
                raise EntityNotFoundException("CustomProduct", product_id)
            yield custom_product_to_domain(row)

    def add(self, product: CustomProduct) -> CustomProduct:
        with transaction.atomic():
            models.CustomProduct.objects.create(
                id=product.id,
                name=product.name,
                price=product.price,
                product_type=product.product_type,
                version=product.version,
            )
            self._write_parts(product)
        return product

    def save(self, product: CustomProduct) -> CustomProduct:
        with transaction.atomic():
            updated = models.CustomProduct.objects.filter(pk=product.id).update(
                name=product.name,
                price=product.price,
                product_type=product.product_type,
                version=product.version,
                updated_at=product.updated_at,
            )
            if not updated:
                raise EntityNotFoundException("CustomProduct", product.id)
            models.CustomProductPart.objects.filter(custom_product_id=product.id).delete()
            self._write_parts(product)
        return product

    def delete(self, product_id: UUID) -> bool:
        deleted, _ = models.CustomProduct.objects.filter(pk=product_id).delete()
        return deleted > 0

    def _write_parts(self, product: CustomProduct) -> None:
        models.CustomProductPart.objects.bulk_create([
            models.CustomProductPart(
                custom_product_id=product.id,
                part_id=part.id,
                position=position,
            )
            for position, part in enumerate(product.parts)
        ])
