"""Shared domain exceptions and the DRF error renderer.

Module-level exceptions (``ProductNotFound``, ``ProductAlreadyExists``...)
extend the two base kinds defined here.  ``exception_handler`` is wired
as ``REST_FRAMEWORK["EXCEPTION_HANDLER"]`` and renders every API error in
a single shape::

    {"type": "client_error", "errors": [{"code": ..., "detail": ..., "attr": ...}]}
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.core.exceptions import PermissionDenied
from django.db.models import ProtectedError
from django.http import Http404
from pydantic import ValidationError as PydanticValidationError
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = structlog.get_logger(__name__)


class NotFoundException(Exception):
    """The referenced entity has no matching record."""


class AlreadyExistsException(Exception):
    """Creation conflicts with an existing record."""


def _flatten(detail: Any, attr: Optional[str] = None) -> List[Dict[str, Any]]:
    """Turn DRF's nested ``detail`` structure into a flat error list."""
    if isinstance(detail, dict):
        errors: List[Dict[str, Any]] = []
        for key, value in detail.items():
            field = key if key != "non_field_errors" else None
            errors.extend(_flatten(value, f"{attr}.{key}" if attr else field))
        return errors
    if isinstance(detail, list):
        errors = []
        for item in detail:
            errors.extend(_flatten(item, attr))
        return errors
    code = getattr(detail, "code", "error")
    return [{"code": code, "detail": str(detail), "attr": attr}]


def _error_response(error_type: str, errors: List[Dict[str, Any]], status_code: int) -> Response:
    return Response({"type": error_type, "errors": errors}, status=status_code)


def exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    """Map domain and DRF exceptions to the standard error payload.

    Anything not recognised returns ``None`` so DRF re-raises it (500).
    """
    if isinstance(exc, NotFoundException):
        logger.info("api.not_found", detail=str(exc))
        return _error_response(
            "client_error",
            [{"code": "not_found", "detail": str(exc), "attr": None}],
            status.HTTP_404_NOT_FOUND,
        )

    if isinstance(exc, AlreadyExistsException):
        logger.info("api.conflict", detail=str(exc))
        return _error_response(
            "client_error",
            [{"code": "already_exists", "detail": str(exc), "attr": None}],
            status.HTTP_409_CONFLICT,
        )

    if isinstance(exc, ProtectedError):
        logger.info("api.protected", detail=str(exc.args[0]))
        return _error_response(
            "client_error",
            [{"code": "protected", "detail": "Record is still referenced.", "attr": None}],
            status.HTTP_409_CONFLICT,
        )

    if isinstance(exc, PydanticValidationError):
        errors = [
            {
                "code": "invalid",
                "detail": error["msg"],
                "attr": ".".join(str(loc) for loc in error["loc"]) or None,
            }
            for error in exc.errors()
        ]
        return _error_response("validation_error", errors, status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, Http404):
        exc = exceptions.NotFound()
    elif isinstance(exc, PermissionDenied):
        exc = exceptions.PermissionDenied()

    response = drf_exception_handler(exc, context)
    if response is None:
        return None

    error_type = (
        "validation_error" if isinstance(exc, exceptions.ValidationError) else "client_error"
    )
    response.data = {"type": error_type, "errors": _flatten(exc.detail)}
    return response
