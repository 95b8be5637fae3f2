"""
In-memory adapters for the domain ports.

Used by the domain and service tests so they run without a database.
"""

from collections import defaultdict
from contextlib import contextmanager
from copy import deepcopy
from decimal import Decimal
import threading
from typing import Dict, Iterable, Iterator, List, Optional
from uuid import UUID

from domain.assembly.aggregates import CustomProduct
from domain.assembly.repositories import CustomProductRepository
from domain.catalog.entities import Part
from domain.catalog.repositories import PartCatalog
from domain.shared.events import DomainEvent, EventPublisher
from domain.shared.exceptions import EntityNotFoundException


class InMemoryPartCatalog(PartCatalog):

    def __init__(self, parts: Iterable[Part] = ()):
        self._parts: Dict[UUID, Part] = {}
        for part in parts:
            self.add(part)

    def add(self, part: Part) -> Part:
        self._parts[part.id] = part
        return part

    def get_by_id(self, part_id: UUID) -> Optional[Part]:
        return self._parts.get(part_id)

    def find_by_ids(self, ids: Iterable[UUID]) -> List[Part]:
        return [self._parts[i] for i in ids if i in self._parts]

    def find_by_product_type(self, product_type: str) -> List[Part]:
        return [p for p in self._parts.values() if p.product_type == product_type]

    def find_all(self) -> List[Part]:
        return list(self._parts.values())


class InMemoryCustomProductRepository(CustomProductRepository):
    """Stores deep copies so callers only see committed state."""

    def __init__(self):
        self._rows: Dict[UUID, CustomProduct] = {}
        self._locks: Dict[UUID, threading.Lock] = defaultdict(threading.Lock)
        self._guard = threading.Lock()

    def _lock_for(self, product_id: UUID) -> threading.Lock:
        with self._guard:
            return self._locks[product_id]

    def get_by_id(self, product_id: UUID) -> Optional[CustomProduct]:
        row = self._rows.get(product_id)
        return deepcopy(row) if row is not None else None

    @contextmanager
    def locked(self, product_id: UUID) -> Iterator[CustomProduct]:
        with self._lock_for(product_id):
            row = self._rows.get(product_id)
            if row is None:
                raise EntityNotFoundException("CustomProduct", product_id)
            yield deepcopy(row)

    def add(self, product: CustomProduct) -> CustomProduct:
        self._store(product)
        return product

    def save(self, product: CustomProduct) -> CustomProduct:
        if product.id not in self._rows:
            raise EntityNotFoundException("CustomProduct", product.id)
        self._store(product)
        return product

    def delete(self, product_id: UUID) -> bool:
        return self._rows.pop(product_id, None) is not None

    def _store(self, product: CustomProduct) -> None:
        row = deepcopy(product)
        row.pull_events()
        self._rows[product.id] = row


class RecordingPublisher(EventPublisher):

    def __init__(self):
        self.events: List[DomainEvent] = []

    def publish(self, events: List[DomainEvent]) -> None:
        self.events.extend(events)

    @property
    def names(self) -> List[str]:
        return [event.event_name for event in self.events]


def make_part(category, value, product_type='bicycle', quantity=5, price='10.00', **kwargs):
    return Part(
        product_type=product_type,
        category=category,
        value=value,
        price=Decimal(price),
        quantity=quantity,
        **kwargs,
    )


def make_product(parts=(), product_type='bicycle', name='My bike', price='100.00'):
    return CustomProduct(
        name=name,
        price=Decimal(price),
        product_type=product_type,
        _parts=list(parts),
    )
