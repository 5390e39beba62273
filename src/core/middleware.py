"""Middleware rendering an outage page when the database is unreachable."""

import logging

from django.db import DatabaseError
from django.shortcuts import render
from django.utils.deprecation import MiddlewareMixin
from rest_framework import status

logger = logging.getLogger(__name__)


class DatabaseUnavailableMiddleware(MiddlewareMixin):
    """Turn a DatabaseError escaping an HTML view into a 503 page.

    API views never reach this hook for database errors: DRF hands them to
    ``core.exceptions.custom_exception_handler`` first.
    """

    def process_exception(self, request, exception):
        if not isinstance(exception, DatabaseError):
            return None

        logger.error("Database error while handling %s %s", request.method, request.path, exc_info=exception)
        return render(request, "503.html", status=status.HTTP_503_SERVICE_UNAVAILABLE)


__all__ = ["DatabaseUnavailableMiddleware"]
