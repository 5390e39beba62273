"""QuerySet and manager exposing the post feed query."""

from django.db import models


class PostQuerySet(models.QuerySet):
    def with_author(self):
        """Join the author row so iterating posts does not query per post."""
        return self.select_related("author")

    def latest_first(self):
        return self.order_by("-created_at", "-id")


class PostManager(models.Manager.from_queryset(PostQuerySet)):
    """Default manager for Post."""

    def for_index(self):
        """Return every post, newest first, with its author pre-loaded."""
        return self.get_queryset().with_author().latest_first()


__all__ = ["PostManager", "PostQuerySet"]
