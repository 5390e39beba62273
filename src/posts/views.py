"""Post feed views: the HTML index page and the read-only JSON API."""

import logging

from django.shortcuts import render

from core.response import BaseReadOnlyViewSet
from .models import Post
from .serializers import PostSerializer

logger = logging.getLogger(__name__)

INDEX_TEMPLATE = "posts/index.html"


def index(request):
    """Render every post, newest first, each with its author."""
    posts = Post.objects.for_index()
    logger.debug("Rendering %s", INDEX_TEMPLATE)
    return render(request, INDEX_TEMPLATE, {"posts": posts})


class PostViewSet(BaseReadOnlyViewSet):
    """List and retrieve posts in the same order as the index page."""

    serializer_class = PostSerializer

    def get_queryset(self):
        return Post.objects.for_index()


__all__ = ["INDEX_TEMPLATE", "PostViewSet", "index"]
