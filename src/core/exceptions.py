"""Custom exception handling to enforce the API error envelope."""

import logging
from typing import Any

from django.db import DatabaseError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)

SERVICE_UNAVAILABLE_MESSAGE = "Service temporarily unavailable."


def _normalize_errors(payload: Any) -> list[Any]:
    """Convert DRF's response.data into a list for the envelope."""

    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and "detail" in payload:
        # Common DRF pattern: {"detail": "..."}
        return [payload["detail"]]
    return [payload]


def custom_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    """Wrap DRF errors in `{ "data": null, "errors": [...] }` shape.

    - Database errors become a 503 outage response.
    - Everything else goes through DRF's default handler first; exceptions
      it does not recognise (``None``) propagate to Django.
    """

    if isinstance(exc, DatabaseError):
        view = context.get("view")
        logger.error(
            "Database error while handling %s", type(view).__name__ if view else "request", exc_info=exc
        )
        return Response(
            {"data": None, "errors": [SERVICE_UNAVAILABLE_MESSAGE]},
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    response = drf_exception_handler(exc, context)

    if response is None:
        return response

    # Successful responses are untouched here; EnvelopeMixin handles them.
    if response.status_code >= 400:
        response.data = {"data": None, "errors": _normalize_errors(response.data)}

    return response


__all__ = ["SERVICE_UNAVAILABLE_MESSAGE", "custom_exception_handler"]
