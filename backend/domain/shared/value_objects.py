"""
Shared Value Objects used across multiple domains.

Value Objects are immutable objects that describe characteristics of a thing.
Two value objects are equal if all their properties are equal.
"""

from __future__ import annotations
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from .exceptions import ValidationException


DEFAULT_PRODUCT_TYPE = "bicycle"


# =============================================================================
# ENUMERATIONS
# =============================================================================

class PartCategory(str, Enum):
    """Part categories referenced by the compatibility rules."""

    FRAME_TYPE = "frameType"
    FRAME_FINISH = "frameFinish"
    WHEELS = "wheels"
    RIM_COLOR = "rimColor"
    CHAIN = "chain"


class PartValue(str, Enum):
    """Part values referenced by the compatibility rules."""

    FULL_SUSPENSION = "full-suspension"
    MOUNTAIN_WHEELS = "mountain wheels"
    FAT_BIKE_WHEELS = "fat bike wheels"
    RED = "red"


# =============================================================================
# HELPERS
# =============================================================================

def to_price(value: Any, field: str = "price") -> Decimal:
    """Coerce to a non-negative Decimal with two decimal places."""
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationException("Price must be a number", field, value)
    if not amount.is_finite():
        raise ValidationException("Price must be a number", field, value)
    if amount < 0:
        raise ValidationException("Price must be a positive number", field, value)
    return amount.quantize(Decimal("0.01"))
