"""App configuration for the posts Django application.

Registers the post feed system checks when Django starts.
"""

from django.apps import AppConfig


class PostsConfig(AppConfig):
    """Application configuration for the posts app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "posts"

    def ready(self) -> None:
        """Register system checks when the app is loaded."""
        from . import checks  # noqa: F401
