"""
Seed Catalog Command.

Purpose:
- Optionally clear custom products, parts and base products.
- Seed a bicycle catalog: one base product and a part for every value the
  assembly rules care about (frame types, wheels, rim colors).

Safe to run repeatedly: existing parts are matched on
(product_type, category, value) and left untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
import logging

from django.core.management.base import BaseCommand
from django.db import transaction

logger = logging.getLogger('configurator')


@dataclass(frozen=True)
class PartSpec:
    category: str
    value: str
    price: Decimal
    quantity: int


BICYCLE_PARTS = [
    PartSpec('frameType', 'full-suspension', Decimal('130.00'), 10),
    PartSpec('frameType', 'diamond', Decimal('100.00'), 10),
    PartSpec('frameType', 'step-through', Decimal('90.00'), 5),
    PartSpec('frameFinish', 'matte', Decimal('50.00'), 20),
    PartSpec('frameFinish', 'shiny', Decimal('30.00'), 20),
    PartSpec('wheels', 'road wheels', Decimal('80.00'), 15),
    PartSpec('wheels', 'mountain wheels', Decimal('95.00'), 8),
    PartSpec('wheels', 'fat bike wheels', Decimal('110.00'), 4),
    PartSpec('rimColor', 'red', Decimal('35.00'), 12),
    PartSpec('rimColor', 'black', Decimal('20.00'), 30),
    PartSpec('rimColor', 'blue', Decimal('20.00'), 0),
    PartSpec('chain', 'single-speed chain', Decimal('43.00'), 25),
    PartSpec('chain', '8-speed chain', Decimal('55.00'), 10),
]


class Command(BaseCommand):
    help = 'Seed the bicycle part catalog'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Delete custom products, parts and products before seeding'
        )
        parser.add_argument(
            '--product-type',
            type=str,
            default='bicycle',
            help='Product type to seed the parts under'
        )

    def handle(self, *args, **options):
        product_type = options['product_type']

        with transaction.atomic():
            if options['clear']:
                self.stdout.write('Clearing catalog...')
                self._clear()
                self.stdout.write(self.style.SUCCESS('Catalog cleared.'))

            self.stdout.write('Seeding catalog...')
            created = self._seed(product_type)

        self.stdout.write(
            self.style.SUCCESS(f'Catalog seeded: {created} new parts for {product_type}.')
        )

    def _clear(self):
        from infrastructure.persistence.models import CustomProduct, Part, Product

        CustomProduct.objects.all().delete()
        Part.objects.all().delete()
        Product.objects.all().delete()

    def _seed(self, product_type: str) -> int:
        from infrastructure.persistence.models import Part, Product

        Product.objects.get_or_create(
            type=product_type,
            name=f'Custom {product_type}',
            defaults={
                'price': Decimal('0.00'),
                'is_available': True,
                'restrictions': {
                    'rimColor': ['red'],
                    'wheels': ['mountain wheels'],
                },
            },
        )

        created = 0
        for entry in BICYCLE_PARTS:
            _, was_created = Part.objects.get_or_create(
                product_type=product_type,
                category=entry.category,
                value=entry.value,
                defaults={
                    'price': entry.price,
                    'quantity': entry.quantity,
                    'is_available': True,
                },
            )
            if was_created:
                created += 1
                logger.info(f"Seeded part {product_type}/{entry.category}='{entry.value}'")
        return created
