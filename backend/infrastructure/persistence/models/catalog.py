"""
Catalog Models.

Base products and the parts custom products are assembled from.
"""

from django.core.validators import MinValueValidator
from django.db import models
from simple_history.models import HistoricalRecords

from domain.shared.value_objects import DEFAULT_PRODUCT_TYPE

from .base import CatalogModel


class Product(CatalogModel):
    """
    Base product offered by the shop (e.g. "Mountain bike").
    """

    type = models.CharField(
        max_length=100,
        default=DEFAULT_PRODUCT_TYPE,
        db_index=True,
        verbose_name="Product type"
    )
    name = models.CharField(
        max_length=255,
        verbose_name="Name"
    )
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(0)],
        verbose_name="Base price"
    )
    is_available = models.BooleanField(
        default=False,
        verbose_name="Available for sale"
    )
    # category -> allowed values; informational, not enforced
    restrictions = models.JSONField(
        null=True,
        blank=True,
        default=None,
        verbose_name="Restrictions"
    )

    class Meta:
        db_table = 'products'
        verbose_name = 'Product'
        verbose_name_plural = 'Products'
        ordering = ['type', 'name']

    def __str__(self):
        return f"{self.name} ({self.type})"


class Part(CatalogModel):
    """
    Catalog part: one value for one category of one product type.

    ``is_available`` is forced off on save whenever stock is not positive.
    """

    product_type = models.CharField(
        max_length=100,
        default=DEFAULT_PRODUCT_TYPE,
        db_index=True,
        verbose_name="Product type"
    )
    category = models.CharField(
        max_length=100,
        verbose_name="Category"
    )
    value = models.CharField(
        max_length=255,
        verbose_name="Value"
    )
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(0)],
        verbose_name="Price"
    )
    quantity = models.IntegerField(
        default=0,
        validators=[MinValueValidator(0)],
        verbose_name="Stock quantity"
    )
    is_available = models.BooleanField(
        default=True,
        verbose_name="Available"
    )

    history = HistoricalRecords()

    class Meta:
        db_table = 'parts'
        verbose_name = 'Part'
        verbose_name_plural = 'Parts'
        ordering = ['product_type', 'category', 'value']
        constraints = [
            models.UniqueConstraint(
                fields=['category', 'value', 'product_type'],
                name='unique_part_per_product_type',
            ),
        ]
        indexes = [
            models.Index(fields=['product_type', 'category']),
        ]

    def __str__(self):
        return f"{self.product_type}: {self.category} = {self.value}"

    def save(self, *args, **kwargs):
        if self.quantity is not None and self.quantity <= 0:
            self.is_available = False
            update_fields = kwargs.get('update_fields')
            if update_fields is not None and 'is_available' not in update_fields:
                kwargs['update_fields'] = list(update_fields) + ['is_available']
        super().save(*args, **kwargs)
