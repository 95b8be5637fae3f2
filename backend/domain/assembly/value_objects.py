"""
Assembly Domain - Value Objects.

Structured results returned by the assembly validator.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional
from uuid import UUID


@dataclass(frozen=True)
class Violation:
    """
    Rejection reason for a proposed assembly.

    ``rule`` names the rule that failed; ``category``/``value`` point at the
    offending slot so clients can highlight it.
    """

    rule: str
    message: str
    category: Optional[str] = None
    value: Optional[str] = None
    part_id: Optional[UUID] = None

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rule": self.rule,
            "message": self.message,
            "category": self.category,
            "value": self.value,
            "part_id": str(self.part_id) if self.part_id else None,
        }


@dataclass(frozen=True)
class IncompatiblePart:
    """An attached part that blocks a product type change."""

    part_id: UUID
    category: str
    product_type: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self.part_id),
            "category": self.category,
            "product_type": self.product_type,
        }
