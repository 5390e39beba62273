"""Serializers for the read-only post API."""

from django.contrib.auth import get_user_model
from rest_framework import serializers

from .models import Post


class AuthorSerializer(serializers.ModelSerializer):
    """Public byline; the email address is never exposed."""

    class Meta:
        model = get_user_model()
        fields = ["id", "name"]
        read_only_fields = fields


class PostSerializer(serializers.ModelSerializer):
    author = AuthorSerializer(read_only=True)

    class Meta:
        """Expose post content with its nested author; everything is read-only."""
        model = Post
        fields = ["id", "title", "body", "author", "created_at", "updated_at"]
        read_only_fields = fields


__all__ = ["AuthorSerializer", "PostSerializer"]
