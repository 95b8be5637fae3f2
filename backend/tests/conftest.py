"""
Shared fixtures.

Domain and service tests use the in-memory fakes; API tests use the Django
test database through pytest-django.
"""

from decimal import Decimal

import pytest

from application.services.customization import CustomizationService
from domain.assembly.validator import AssemblyValidator

from .fakes import (
    InMemoryCustomProductRepository,
    InMemoryPartCatalog,
    RecordingPublisher,
    make_part,
)


@pytest.fixture
def validator():
    return AssemblyValidator()


@pytest.fixture
def hardtail():
    return make_part('frameType', 'hardtail')


@pytest.fixture
def full_suspension():
    return make_part('frameType', 'full-suspension')


@pytest.fixture
def mountain_wheels():
    return make_part('wheels', 'mountain wheels')


@pytest.fixture
def fat_bike_wheels():
    return make_part('wheels', 'fat bike wheels')


@pytest.fixture
def road_wheels():
    return make_part('wheels', 'road wheels')


@pytest.fixture
def red_rims():
    return make_part('rimColor', 'red')


@pytest.fixture
def black_rims():
    return make_part('rimColor', 'black')


@pytest.fixture
def catalog(hardtail, full_suspension, mountain_wheels, fat_bike_wheels,
            road_wheels, red_rims, black_rims):
    return InMemoryPartCatalog([
        hardtail, full_suspension, mountain_wheels, fat_bike_wheels,
        road_wheels, red_rims, black_rims,
    ])


@pytest.fixture
def repository():
    return InMemoryCustomProductRepository()


@pytest.fixture
def publisher():
    return RecordingPublisher()


@pytest.fixture
def service(catalog, repository, publisher):
    return CustomizationService(catalog, repository, publisher)


# =============================================================================
# API / DATABASE
# =============================================================================

@pytest.fixture
def api_client():
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def create_part(db):
    from infrastructure.persistence.models import Part

    def _create(category, value, product_type='bicycle', quantity=5, price='10.00', **kwargs):
        return Part.objects.create(
            product_type=product_type,
            category=category,
            value=value,
            price=Decimal(price),
            quantity=quantity,
            **kwargs,
        )
    return _create
