import logging

from django.db import IntegrityError
from django.db.models.deletion import ProtectedError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from domain.shared.exceptions import (
    DomainException,
    EntityNotFoundException,
    InvalidOperationException,
    PartsNotFoundException,
)

logger = logging.getLogger(__name__)


def _domain_status(exc: DomainException) -> int:
    if isinstance(exc, (EntityNotFoundException, PartsNotFoundException)):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, InvalidOperationException):
        return status.HTTP_409_CONFLICT
    # rule violations and input validation
    return status.HTTP_400_BAD_REQUEST


def custom_exception_handler(exc, context):
    """
    Map domain and database errors to API responses.

    Domain errors render as ``{"error": message, "code": code, **details}``;
    anything else falls through to the default DRF handler.
    """
    if isinstance(exc, DomainException):
        return Response(exc.to_dict(), status=_domain_status(exc))

    if isinstance(exc, ProtectedError):
        protected = [str(o) for o in list(exc.protected_objects)[:5]]
        return Response(
            {
                'detail': 'Cannot delete object: it is referenced by other records.',
                'error': 'protected_error',
                'protected_objects_sample': protected,
            },
            status=status.HTTP_409_CONFLICT,
        )

    if isinstance(exc, IntegrityError):
        logger.warning(f"Integrity error: {exc}")
        return Response(
            {
                'detail': 'Data integrity violation.',
                'error': 'integrity_error',
            },
            status=status.HTTP_409_CONFLICT,
        )

    return exception_handler(exc, context)
