"""
Domain Exceptions.

Every domain error carries a human readable message, a stable machine code
and a flat dict of details. The API layer renders them through ``to_dict``
and picks the status code from the exception class.
"""

from typing import Any, Dict, Iterable, Optional


class DomainException(Exception):
    """Base exception for all domain errors."""

    code = "DOMAIN_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.details = dict(details or {})

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, "code": self.code, **self.details}


class EntityNotFoundException(DomainException):
    """A custom product or part looked up by id does not exist."""

    code = "ENTITY_NOT_FOUND"

    def __init__(self, entity_type: str, entity_id: Any):
        super().__init__(
            f"{entity_type} with id '{entity_id}' not found",
            details={"entity_type": entity_type, "entity_id": str(entity_id)},
        )


class PartsNotFoundException(DomainException):
    """Some ids in a part list are unknown to the catalog."""

    code = "PARTS_NOT_FOUND"

    def __init__(self, missing_ids: Iterable[Any]):
        self.missing_ids = sorted(str(part_id) for part_id in missing_ids)
        super().__init__(
            f"Some parts do not exist: {', '.join(self.missing_ids)}",
            details={"missing_ids": self.missing_ids},
        )


class InvalidOperationException(DomainException):
    """The request is well formed but makes no sense for the current state."""

    code = "INVALID_OPERATION"


class ValidationException(DomainException):
    """A field value is missing or malformed."""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        details = {"field": field}
        if value is not None:
            details["value"] = str(value)
        super().__init__(message, details=details)


class BusinessRuleViolationException(DomainException):
    """A change was refused by a compatibility or assembly rule."""

    code = "BUSINESS_RULE_VIOLATION"

    def __init__(self, rule: str, message: str, code: Optional[str] = None):
        super().__init__(message, code=code, details={"rule": rule})
        self.rule = rule
