"""
Assembly Domain - Exceptions.

Raised by the custom product aggregate when the validator rejects a change.
The validator itself never raises; it returns the reason as data.
"""

from typing import List

from domain.shared.exceptions import BusinessRuleViolationException

from .value_objects import IncompatiblePart, Violation


class AssemblyViolationException(BusinessRuleViolationException):
    """A proposed part combination breaks a compatibility rule."""

    def __init__(self, violation: Violation):
        super().__init__(
            rule=violation.rule,
            message=violation.message,
            code="ASSEMBLY_VIOLATION",
        )
        self.violation = violation
        self.details["violation"] = violation.to_dict()


class IncompatiblePartsException(BusinessRuleViolationException):
    """Attached parts prevent a product type change."""

    def __init__(self, new_type: str, incompatible_parts: List[IncompatiblePart]):
        super().__init__(
            rule="product_type_change",
            message="Cannot change product type because some existing parts are incompatible.",
            code="INCOMPATIBLE_PARTS",
        )
        self.new_type = new_type
        self.incompatible_parts = list(incompatible_parts)
        self.details["product_type"] = new_type
        self.details["incompatible_parts"] = [
            part.to_dict() for part in self.incompatible_parts
        ]
