"""Routing for the post index page and the post API."""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import PostViewSet, index

router = DefaultRouter()
router.register(r"posts", PostViewSet, basename="post")

urlpatterns = [
    path("", index, name="posts-index"),
    path("api/", include(router.urls)),
]
