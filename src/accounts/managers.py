"""Manager for author accounts and the bcrypt helpers behind their passwords."""

import bcrypt
from django.contrib.auth.base_user import BaseUserManager


class UserManager(BaseUserManager):
    """Create authors; an author created without a password cannot log in."""

    use_in_migrations = True

    def create_user(self, email: str, password: str | None = None, display_name: str = "", **extra_fields):
        """Create a regular author account."""
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        return self._create_author(email, password, display_name, **extra_fields)

    def create_superuser(self, email: str, password: str | None = None, display_name: str = "", **extra_fields):
        """Create an admin account; used by ``manage.py createsuperuser``."""
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("is_active", True)
        if not extra_fields.get("is_staff"):
            raise ValueError("Superuser must have is_staff=True.")
        if not extra_fields.get("is_superuser"):
            raise ValueError("Superuser must have is_superuser=True.")
        return self._create_author(email, password, display_name, **extra_fields)

    def _create_author(self, email: str, password: str | None, display_name: str, **extra_fields):
        if not email:
            raise ValueError("Authors need an email address")
        author = self.model(email=self.normalize_email(email), display_name=display_name, **extra_fields)
        author.set_password(password)
        author.save(using=self._db)
        return author

    @staticmethod
    def hash_password(raw_password: str | None) -> str:
        """Return a bcrypt hash, or "" (no usable password) for ``None``."""
        if raw_password is None:
            return ""
        return bcrypt.hashpw(raw_password.encode(), bcrypt.gensalt()).decode()

    @staticmethod
    def verify_password(password_hash: str, raw_password: str | None) -> bool:
        if not password_hash or raw_password is None:
            return False
        return bcrypt.checkpw(raw_password.encode(), password_hash.encode())


__all__ = ["UserManager"]
