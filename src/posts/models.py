"""Post model: a blog entry written by an author."""

from django.conf import settings
from django.db import models

from .managers import PostManager


class Post(models.Model):
    """Blog entry linked to the account that wrote it."""

    title = models.CharField(max_length=255)
    body = models.TextField()
    author = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="posts")
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = PostManager()

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.title


__all__ = ["Post"]
