"""Map domain errors to HTTP responses.

Configured as REST_FRAMEWORK["EXCEPTION_HANDLER"]. Anything that is not a
DomainError falls through to DRF's default handling.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from marathon.domain.errors import (
    AccessDeniedError,
    AuthorizationError,
    ConflictError,
    DomainError,
    EligibilityError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_CATEGORY: list[tuple[type[DomainError], int]] = [
    (AuthorizationError, status.HTTP_401_UNAUTHORIZED),
    (AccessDeniedError, status.HTTP_403_FORBIDDEN),
    (EligibilityError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (ConflictError, status.HTTP_409_CONFLICT),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
]


def status_for(exc: DomainError) -> int:
    for category, http_status in _STATUS_BY_CATEGORY:
        if isinstance(exc, category):
            return http_status
    return status.HTTP_400_BAD_REQUEST


def domain_exception_handler(exc, context):
    if not isinstance(exc, DomainError):
        return exception_handler(exc, context)
    http_status = status_for(exc)
    logger.info(
        "Request failed with %s",
        exc.code.value,
        extra={"error_code": exc.code.value, "status": http_status},
    )
    return Response(
        {"error": {"code": exc.code.value, "message": exc.message}},
        status=http_status,
    )
