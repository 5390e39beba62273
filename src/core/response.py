"""Base classes for consistent API envelopes."""

from typing import Any

from rest_framework.viewsets import ReadOnlyModelViewSet


def _is_enveloped(payload: Any) -> bool:
    return isinstance(payload, dict) and "data" in payload and "errors" in payload


class EnvelopeMixin:
    """Mixin to wrap successful responses in the standard envelope."""

    def finalize_response(self, request, response, *args, **kwargs):  # type: ignore[override]
        """Ensure non-error responses include the `{data, errors}` envelope."""
        if hasattr(response, "data") and response.status_code and response.status_code < 400:
            if response.status_code != 204 and not _is_enveloped(response.data):
                response.data = {"data": response.data, "errors": []}
        # DRF's APIView provides finalize_response; the mixin alone doesn't.
        return super().finalize_response(request, response, *args, **kwargs)  # type: ignore[attr-defined]


class BaseReadOnlyViewSet(EnvelopeMixin, ReadOnlyModelViewSet):
    """ReadOnlyModelViewSet variant that wraps successful responses in the envelope."""


__all__ = ["BaseReadOnlyViewSet", "EnvelopeMixin"]
