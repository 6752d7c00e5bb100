"""DRF exception handler translating domain errors into API responses."""

from __future__ import annotations

import structlog
from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

from shared.domain import exceptions as domain

logger = structlog.get_logger(__name__)

STATUS_BY_ERROR: list[tuple[type[domain.DomainError], int]] = [
    (domain.NotFound, status.HTTP_404_NOT_FOUND),
    (domain.Forbidden, status.HTTP_403_FORBIDDEN),
    (domain.DuplicateReview, status.HTTP_409_CONFLICT),
    (domain.InvalidTransition, status.HTTP_409_CONFLICT),
    (domain.InvalidRating, status.HTTP_400_BAD_REQUEST),
    (domain.ValidationError, status.HTTP_400_BAD_REQUEST),
]


def status_for(exc: domain.DomainError) -> int:
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def domain_exception_handler(exc, context):  # type: ignore
    """Render ``DomainError`` as ``{"detail", "code"}``; defer everything else to DRF."""
    if isinstance(exc, domain.DomainError):
        status_code = status_for(exc)
        view = context.get("view")
        logger.info(
            "api.domain_error",
            view=view.__class__.__name__ if view else None,
            code=exc.code,
            status=status_code,
            detail=exc.message,
        )
        return Response({"detail": exc.message, "code": exc.code}, status=status_code)
    return exception_handler(exc, context)
