"""Admin registration for posts."""

from django.contrib import admin

from .models import Post


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ["title", "author", "created_at"]
    list_select_related = ("author",)
    search_fields = ["title", "body", "author__email", "author__display_name"]
    date_hierarchy = "created_at"
    autocomplete_fields = ["author"]
