"""
Error taxonomy shared by the server and the client layer.

Server code raises ``ServiceError`` subclasses and lets the DRF exception
handler turn them into ``{"message": ...}`` responses. Client code never
raises across a component boundary: it returns the tagged results built by
``ok`` and ``fail``.
"""

import logging
from enum import Enum

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    VALIDATION = "ValidationError"
    NOT_FOUND = "NotFoundError"
    CONFLICT = "ConflictError"
    PERMISSION = "PermissionError"
    TIMEOUT = "TimeoutError"
    UNAVAILABLE = "UnavailableError"
    UNKNOWN = "UnknownError"


STATUS_FOR_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.PERMISSION: status.HTTP_403_FORBIDDEN,
    ErrorKind.TIMEOUT: status.HTTP_504_GATEWAY_TIMEOUT,
    ErrorKind.UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorKind.UNKNOWN: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def kind_for_status(status_code):
    """Map an HTTP status code onto an ErrorKind."""
    if status_code == 400:
        return ErrorKind.VALIDATION
    if status_code in (401, 403):
        return ErrorKind.PERMISSION
    if status_code == 404:
        return ErrorKind.NOT_FOUND
    if status_code == 409:
        return ErrorKind.CONFLICT
    if status_code in (408, 504):
        return ErrorKind.TIMEOUT
    if status_code == 503:
        return ErrorKind.UNAVAILABLE
    return ErrorKind.UNKNOWN


class ServiceError(Exception):
    """Base class for errors raised by community services."""

    kind = ErrorKind.UNKNOWN

    def __init__(self, message, *, status_code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code or STATUS_FOR_KIND[self.kind]


class ValidationFailed(ServiceError):
    kind = ErrorKind.VALIDATION


class NotFound(ServiceError):
    kind = ErrorKind.NOT_FOUND


class Conflict(ServiceError):
    kind = ErrorKind.CONFLICT


class Forbidden(ServiceError):
    kind = ErrorKind.PERMISSION


def ok(data=None, **extra):
    """Build a successful tagged result."""
    result = {"success": True, "data": data}
    result.update(extra)
    return result


def fail(kind, message, **extra):
    """Build a failed tagged result; ``data`` is deliberately absent."""
    result = {"success": False, "kind": ErrorKind(kind).value, "message": message}
    result.update(extra)
    return result


def api_exception_handler(exc, context):
    """DRF exception handler that renders ServiceError and keeps a ``message`` key."""
    if isinstance(exc, ServiceError):
        logger.debug("Service error in %s: %s", context.get("view"), exc.message)
        return Response({"message": exc.message}, status=exc.status_code)

    response = exception_handler(exc, context)
    if response is not None and isinstance(response.data, dict) and "detail" in response.data:
        response.data = {"message": str(response.data["detail"])}
    return response
