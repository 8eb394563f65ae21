"""DRF exception handler rendering every error as ``{"error": ..., "success": false}``.

Service exceptions raised by the canvas pipeline are mapped to HTTP statuses
here so views can let them propagate.
"""

from __future__ import annotations

import logging
from typing import Any

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from imagecanvas.services.exceptions import (
    ConfigurationError,
    DownstreamError,
    ImageProcessingError,
    ServiceError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: list[tuple[type[ServiceError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ImageProcessingError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (DownstreamError, status.HTTP_502_BAD_GATEWAY),
    (ConfigurationError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def _status_for(exc: ServiceError) -> int:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _flatten_detail(detail: Any) -> str:
    if isinstance(detail, dict):
        if "detail" in detail:
            return _flatten_detail(detail["detail"])
        return "; ".join(f"{key}: {_flatten_detail(value)}" for key, value in detail.items())
    if isinstance(detail, list):
        return " ".join(_flatten_detail(item) for item in detail)
    return str(detail)


def api_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    if isinstance(exc, ServiceError):
        status_code = _status_for(exc)
        if status_code == status.HTTP_400_BAD_REQUEST:
            logger.info(f"Request rejected: {exc}")
            return Response({"error": exc.message, "success": False}, status=status_code)
        logger.error(f"Processing error: {exc}")
        return Response({"error": f"Processing error: {exc.message}", "success": False}, status=status_code)

    response = exception_handler(exc, context)
    if response is not None:
        response.data = {"error": _flatten_detail(response.data), "success": False}
    return response
