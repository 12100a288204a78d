"""Standardized error responses.

Every API error leaves the service in the same envelope::

    {"type": "validation_error", "errors": [{"code": ..., "detail": ..., "attr": ...}]}

``standardized_exception_handler`` is installed as DRF's
``EXCEPTION_HANDLER``; views that translate domain exceptions themselves
build the same body with ``error_response``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)

VALIDATION_ERROR = "validation_error"
CLIENT_ERROR = "client_error"
SERVER_ERROR = "server_error"


def build_error_payload(
    error_type: str, errors: List[Dict[str, Any]]
) -> Dict[str, Any]:
    return {"type": error_type, "errors": errors}


def error_response(
    code: str,
    detail: str,
    status_code: int,
    attr: Optional[str] = None,
    error_type: Optional[str] = None,
) -> Response:
    """Build a single-error response in the standardized format."""
    if error_type is None:
        error_type = SERVER_ERROR if status_code >= 500 else CLIENT_ERROR
    payload = build_error_payload(
        error_type, [{"code": code, "detail": detail, "attr": attr}]
    )
    return Response(payload, status=status_code)


def _flatten(detail: Any, attr: Optional[str] = None) -> List[Dict[str, Any]]:
    """Flatten DRF's nested ``ErrorDetail`` structures into a list."""
    if isinstance(detail, dict):
        errors: List[Dict[str, Any]] = []
        for key, value in detail.items():
            nested = key if attr is None else f"{attr}.{key}"
            if key in ("non_field_errors", "detail") and attr is None:
                nested = None
            errors.extend(_flatten(value, nested))
        return errors
    if isinstance(detail, list):
        errors = []
        for item in detail:
            errors.extend(_flatten(item, attr))
        return errors
    return [
        {
            "code": getattr(detail, "code", "error"),
            "detail": str(detail),
            "attr": attr,
        }
    ]


def standardized_exception_handler(exc: Exception, context: Dict[str, Any]):
    """DRF exception handler producing the standardized error envelope."""
    if isinstance(exc, DatabaseError):
        view = context.get("view")
        logger.error(
            "store.failure",
            view=type(view).__name__ if view else None,
            error=str(exc),
        )
        return error_response(
            "store_unavailable",
            "The data store failed to process the request.",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, ValidationError):
        error_type = VALIDATION_ERROR
    elif isinstance(exc, APIException) and response.status_code >= 500:
        error_type = SERVER_ERROR
    else:
        error_type = CLIENT_ERROR

    response.data = build_error_payload(error_type, _flatten(response.data))
    return response
