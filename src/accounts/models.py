"""Custom User model for post authors, with bcrypt-hashed passwords.

Django's groups/permissions tables are not used: staff access to the admin is
granted to active superusers only.
"""

import uuid
from typing import ClassVar, Optional

from django.contrib.auth.models import AbstractBaseUser
from django.db import models

from .managers import UserManager


class User(AbstractBaseUser):
    """Author account identified by email."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True)
    password_hash = models.CharField(max_length=128)
    display_name = models.CharField(max_length=150, blank=True)
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)
    is_superuser = models.BooleanField(default=False)
    date_joined = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS: ClassVar[list[str]] = []

    objects = UserManager()

    class Meta:
        """Default ordering shows newest accounts first."""
        ordering = ["-date_joined"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.email

    @property
    def name(self) -> str:
        """Public byline: the display name, or the email when it is blank."""
        return self.display_name or self.email

    def set_password(self, raw_password: Optional[str]) -> None:  # type: ignore[override]
        """Store a bcrypt hash; ``None`` leaves the author unable to log in."""
        self.password_hash = UserManager.hash_password(raw_password)

    def check_password(self, raw_password: Optional[str]) -> bool:  # type: ignore[override]
        return UserManager.verify_password(self.password_hash, raw_password)

    def has_usable_password(self) -> bool:  # type: ignore[override]
        return bool(self.password_hash)

    def has_perm(self, perm, obj=None) -> bool:
        return self.is_active and self.is_superuser

    def has_module_perms(self, app_label) -> bool:
        return self.is_active and self.is_superuser


__all__ = ["User"]
