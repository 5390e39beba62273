"""App configuration for author accounts."""

from django.apps import AppConfig


class AccountsConfig(AppConfig):
    """Accounts app holds the custom User model that posts point at."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "accounts"
