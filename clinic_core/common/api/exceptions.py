# clinic_core/common/api/exceptions.py
from __future__ import annotations

import logging
from typing import Any

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "Unexpected server error."


class ValidationError(APIException):
    """
    Missing/invalid input or an unresolved foreign key.
    Carries one human-readable message rather than DRF's per-field mapping.
    """
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid input."
    default_code = "validation_error"


class NotFoundError(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found."
    default_code = "not_found"


class ConflictError(APIException):
    """
    409 Conflict that still flows through the global exception handler.
    Use when other rows still depend on the target (e.g. deleting a doctor with patients).
    """
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Conflict."
    default_code = "conflict"


class StorageError(APIException):
    """
    Unexpected persistence failure. Anything that is not an APIException is
    reported to the client as this kind, with the original logged server-side.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = GENERIC_SERVER_ERROR
    default_code = "storage_error"


def flatten_detail(detail: Any) -> str:
    """
    DRF error details can be str / list / dict (per field).
    Collapse them into a single line: "field: message; other: message".
    """
    if isinstance(detail, dict):
        parts = []
        for key, value in detail.items():
            text = flatten_detail(value)
            if key in ("detail", "non_field_errors"):
                parts.append(text)
            else:
                parts.append(f"{key}: {text}")
        return "; ".join(parts)
    if isinstance(detail, (list, tuple)):
        return " ".join(flatten_detail(item) for item in detail)
    return str(detail)


def _storage_error_message(view) -> str:
    describe = getattr(view, "storage_error_message", None)
    if callable(describe):
        return describe()
    return StorageError.default_detail


def api_exception_handler(exc: Exception, context: dict[str, Any]):
    """
    Error envelope for the clinic API:
      400/404/409 -> {"error": "<message>"}
      500         -> {"message": "Could not <verb> <resource>"}
    The original exception of a 500 is logged here and never sent to the client.
    """
    request = context.get("request")
    response = drf_exception_handler(exc, context)

    # DatabaseError and anything else DRF does not know, or an explicit StorageError
    if response is None or response.status_code >= 500:
        logger.error(
            "Unhandled error in %s %s",
            getattr(request, "method", "?"),
            getattr(request, "path", "?"),
            exc_info=exc,
        )
        return Response(
            {"message": _storage_error_message(context.get("view"))},
            status=StorageError.status_code,
        )

    response.data = {"error": flatten_detail(response.data)}
    return response
