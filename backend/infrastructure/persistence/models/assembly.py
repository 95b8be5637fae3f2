"""
Assembly Models.

Custom products and their many-to-many association with catalog parts.
"""

from django.core.validators import MinValueValidator
from django.db import models

from domain.shared.value_objects import DEFAULT_PRODUCT_TYPE

from .base import CatalogModel
from .catalog import Part


class CustomProduct(CatalogModel):
    """
    A product assembled by a customer from catalog parts.

    Parts are shared catalog rows; deleting a custom product removes only the
    association rows.
    """

    product_type = models.CharField(
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
        verbose_name="Price"
    )
    version = models.PositiveIntegerField(
        default=1,
        verbose_name="Version"
    )
    parts = models.ManyToManyField(
        Part,
        through='CustomProductPart',
        related_name='custom_products',
        blank=True,
        verbose_name="Parts"
    )

    class Meta:
        db_table = 'custom_products'
        verbose_name = 'Custom product'
        verbose_name_plural = 'Custom products'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} ({self.product_type})"


class CustomProductPart(models.Model):
    """Association row: one part attached to one custom product."""

    custom_product = models.ForeignKey(
        CustomProduct,
        on_delete=models.CASCADE,
        related_name='part_links',
        verbose_name="Custom product"
    )
    part = models.ForeignKey(
        Part,
        on_delete=models.CASCADE,
        related_name='custom_product_links',
        verbose_name="Part"
    )
    position = models.PositiveIntegerField(
        default=0,
        verbose_name="Position"
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name="Attached at"
    )

    class Meta:
        db_table = 'custom_product_parts'
        verbose_name = 'Custom product part'
        verbose_name_plural = 'Custom product parts'
        ordering = ['position']
        constraints = [
            models.UniqueConstraint(
                fields=['custom_product', 'part'],
                name='unique_part_per_custom_product',
            ),
        ]

    def __str__(self):
        return f"{self.custom_product_id} -> {self.part_id}"
