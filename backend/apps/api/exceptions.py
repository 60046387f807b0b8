from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple, Union

from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from django.utils.translation import gettext_lazy as _
from rest_framework import status
from rest_framework.exceptions import (
    MethodNotAllowed,
    NotFound,
    ParseError,
    UnsupportedMediaType,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from apps.api.utils import error_response
from apps.common import get_logger

logger = get_logger(__name__).bind(component="api", layer="exception")

STATUS_CODE_DEFAULTS: Dict[int, Tuple[str, str]] = {
    status.HTTP_400_BAD_REQUEST: ("VALIDATION_ERROR", _("Validation failed")),
    status.HTTP_404_NOT_FOUND: ("NOT_FOUND", _("Resource not found")),
    status.HTTP_405_METHOD_NOT_ALLOWED: ("METHOD_NOT_ALLOWED", _("Method not allowed")),
    status.HTTP_409_CONFLICT: ("CONFLICT", _("Resource conflict")),
    status.HTTP_415_UNSUPPORTED_MEDIA_TYPE: (
        "UNSUPPORTED_MEDIA_TYPE",
        _("Unsupported media type"),
    ),
    status.HTTP_500_INTERNAL_SERVER_ERROR: ("SERVER_ERROR", _("Something went wrong")),
}


class ApplicationError(Exception):
    """
    Error raised by services that already knows how it should look on the wire.

    Args:
        code: Machine readable error code, e.g. ``NOT_FOUND``.
        message: Human readable explanation.
        status_code: Explicit HTTP status; derived from ``code`` when omitted.
        details: Structured details for clients.
        hint: Remediation hint.
        extra: Additional machine readable fields.
        headers: Response headers to attach.
    """

    def __init__(
        self,
        code: str,
        message: str,
        *,
        status_code: Optional[int] = None,
        details: Optional[Any] = None,
        hint: Optional[str] = None,
        extra: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details
        self.hint = hint
        self.extra = extra
        self.headers = headers

    def to_response(self) -> Response:
        return error_response(
            self.code,
            self.message,
            self.details,
            http_status=self.status_code,
            hint=self.hint,
            extra=self.extra,
            headers=self.headers,
        )


def global_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Translate anything raised below a DRF view into the error envelope."""

    bound_logger = _bind_logger(context)

    if isinstance(exc, ApplicationError):
        bound_logger.info("Handled application error", code=exc.code, status=exc.status_code)
        return exc.to_response()

    if isinstance(exc, DjangoValidationError):
        exc = ValidationError(_normalize_django_validation_error(exc))

    response = drf_exception_handler(exc, context)
    if response is None:
        bound_logger.exception("Unhandled exception bubbled to global handler")
        return error_response(
            "SERVER_ERROR",
            "Something went wrong",
            http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    code, message, details = _normalize_payload(exc, response.data, response.status_code)
    bound_logger.info("Converted API exception", code=code, status=response.status_code)
    return error_response(
        code,
        message,
        details,
        http_status=response.status_code,
        headers=dict(response.headers) if getattr(response, "headers", None) else None,
    )


def _bind_logger(context: Dict[str, Any]):
    log = logger
    view = context.get("view")
    request = context.get("request")
    if view is not None:
        log = log.bind(view=type(view).__name__)
    if request is not None:
        log = log.bind(
            method=getattr(request, "method", None),
            path=getattr(request, "path", None),
        )
    return log


def _normalize_django_validation_error(
    exc: DjangoValidationError,
) -> Union[Dict[str, Any], list]:
    if hasattr(exc, "message_dict"):
        return exc.message_dict
    return list(exc.messages)


def _normalize_payload(
    exc: Exception, payload: Any, status_code: int
) -> Tuple[str, str, Optional[Any]]:
    if isinstance(exc, ValidationError):
        return "VALIDATION_ERROR", _extract_message(payload, "Validation failed"), payload
    if isinstance(exc, ParseError):
        return "VALIDATION_ERROR", _extract_message(payload, "Malformed request"), payload
    if isinstance(exc, (NotFound, Http404)):
        return "NOT_FOUND", _extract_message(payload, "Resource not found"), None
    if isinstance(exc, MethodNotAllowed):
        return "METHOD_NOT_ALLOWED", _extract_message(payload, "Method not allowed"), None
    if isinstance(exc, UnsupportedMediaType):
        return (
            "UNSUPPORTED_MEDIA_TYPE",
            _extract_message(payload, "Unsupported media type"),
            None,
        )

    code, default_message = STATUS_CODE_DEFAULTS.get(
        status_code,
        ("SERVER_ERROR", "Something went wrong") if status_code >= 500
        else ("UNKNOWN_ERROR", "Request failed"),
    )
    if status_code >= 500:
        return code, str(default_message), None
    details = payload if isinstance(payload, (dict, list)) and payload else None
    return code, _extract_message(payload, str(default_message)), details


def _extract_message(payload: Any, fallback: str) -> str:
    if isinstance(payload, str):
        return payload
    if isinstance(payload, dict) and isinstance(payload.get("detail"), str):
        return payload["detail"]
    if isinstance(payload, list) and payload and isinstance(payload[0], str):
        return payload[0]
    return fallback


__all__ = ["ApplicationError", "global_exception_handler"]
