"""API exceptions shared by the domain services.

Services raise these instead of returning error values; Django REST
Framework turns them into HTTP responses. `api_exception_handler` gives
every error body the same ``{"message": ...}`` shape.
"""

from __future__ import annotations

import logging
from typing import Any

from rest_framework import status  # type: ignore
from rest_framework.exceptions import APIException, ValidationError  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

logger = logging.getLogger(__name__)


class ResourceNotFound(APIException):
    """A requested record does not exist or is not attached to its parent."""

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Resource not found."
    default_code = "not_found"


class ResourceAlreadyExists(APIException):
    """A record with the same unique key is already stored."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = "Resource already exists."
    default_code = "conflict"


class BusinessRuleViolation(APIException):
    """The request is well formed but breaks a domain rule."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Request violates a business rule."
    default_code = "business_rule"


def _first_message(data: Any) -> str:
    if isinstance(data, dict):
        for value in data.values():
            return _first_message(value)
    if isinstance(data, (list, tuple)) and data:
        return _first_message(data[0])
    return str(data)


def api_exception_handler(exc, context):  # type: ignore
    response = exception_handler(exc, context)
    if response is None:
        return None

    view = context.get("view")
    logger.warning(
        "api_error status=%s view=%s detail=%s",
        response.status_code,
        view.__class__.__name__ if view else None,
        getattr(exc, "detail", exc),
    )

    if isinstance(exc, ValidationError):
        response.data = {"message": _first_message(response.data), "errors": response.data}
    elif isinstance(response.data, dict) and "detail" in response.data:
        response.data = {"message": str(response.data["detail"])}
    return response
