"""Shared helpers for tests (author and post creation)."""

from __future__ import annotations

from datetime import datetime

from django.contrib.auth import get_user_model

from accounts.managers import UserManager
from posts.models import Post

User = get_user_model()


def create_author(email: str, display_name: str = "", password: str = "AuthorPass123", **extra):
    """Create an author with a bcrypt-hashed password for tests."""

    return User.objects.create(
        email=email,
        display_name=display_name,
        password_hash=UserManager.hash_password(password),
        **extra,
    )


def create_post(title: str, author, created_at: datetime | None = None, body: str = "Body") -> Post:
    """Create a post, optionally backdated to ``created_at``.

    ``created_at`` uses auto_now_add, so the timestamp is rewritten with an
    UPDATE after the insert.
    """

    post = Post.objects.create(title=title, body=body, author=author)
    if created_at is not None:
        Post.objects.filter(pk=post.pk).update(created_at=created_at)
        post.refresh_from_db()
    return post
