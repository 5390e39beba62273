"""Tests for the HTML post index page."""

from __future__ import annotations

from datetime import timedelta
from unittest import mock

from django.db import DatabaseError
from django.test import TestCase
from django.urls import reverse
from django.utils import timezone

from posts.models import Post
from tests.utils import create_author, create_post


class PostIndexTests(TestCase):
    """The index renders every post, newest first, with authors pre-loaded."""

    @classmethod
    def setUpTestData(cls):
        """Seed two authors and three posts with distinct timestamps."""
        cls.ada = create_author("ada@test.com", "Ada")
        cls.grace = create_author("grace@test.com", "Grace")

        now = timezone.now()
        cls.oldest = create_post("Oldest post", cls.ada, now - timedelta(days=3))
        cls.middle = create_post("Middle post", cls.grace, now - timedelta(days=2))
        cls.newest = create_post("Newest post", cls.ada, now - timedelta(days=1))

    def test_renders_index_template_with_all_posts(self):
        response = self.client.get(reverse("posts-index"))

        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, "posts/index.html")
        self.assertEqual(list(response.context["posts"]), [self.newest, self.middle, self.oldest])

    def test_each_post_carries_its_author(self):
        """Authors are joined in the same query, not fetched lazily."""
        response = self.client.get(reverse("posts-index"))

        posts = list(response.context["posts"])
        for post in posts:
            self.assertTrue(Post.author.is_cached(post))
        self.assertEqual([post.author for post in posts], [self.ada, self.grace, self.ada])

    def test_index_renders_with_a_single_query(self):
        with self.assertNumQueries(1):
            response = self.client.get(reverse("posts-index"))
        self.assertEqual(response.status_code, 200)

    def test_markup_lists_titles_and_bylines_newest_first(self):
        content = self.client.get(reverse("posts-index")).content.decode()

        positions = [content.index(post.title) for post in (self.newest, self.middle, self.oldest)]
        self.assertEqual(positions, sorted(positions))
        self.assertIn("Ada", content)
        self.assertIn("Grace", content)
        self.assertNotIn("No posts yet.", content)

    def test_new_post_moves_to_the_top(self):
        fresh = create_post("Fresh post", self.grace)

        response = self.client.get(reverse("posts-index"))

        self.assertEqual(list(response.context["posts"])[0], fresh)
        self.assertEqual(len(response.context["posts"]), 4)

    def test_database_outage_renders_503_page(self):
        """A DatabaseError escaping the view is rendered as the outage page."""
        with mock.patch.object(Post.objects, "for_index", side_effect=DatabaseError("connection refused")):
            with self.assertLogs("core.middleware", level="ERROR"):
                response = self.client.get(reverse("posts-index"))

        self.assertEqual(response.status_code, 503)
        self.assertTemplateUsed(response, "503.html")


class EmptyPostIndexTests(TestCase):
    def test_empty_store_renders_empty_page(self):
        response = self.client.get(reverse("posts-index"))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(list(response.context["posts"]), [])
        self.assertContains(response, "No posts yet.")


class PostQuerySetTests(TestCase):
    """Ordering and eager-loading helpers behind the index."""

    @classmethod
    def setUpTestData(cls):
        cls.author = create_author("author@test.com", "Author")

    def test_same_timestamp_orders_by_id_descending(self):
        created_at = timezone.now() - timedelta(hours=1)
        first = create_post("First", self.author, created_at)
        second = create_post("Second", self.author, created_at)

        self.assertEqual(list(Post.objects.for_index()), [second, first])

    def test_with_author_avoids_per_post_queries(self):
        for i in range(3):
            create_post(f"Post {i}", self.author)

        with self.assertNumQueries(1):
            names = [post.author.name for post in Post.objects.with_author()]
        self.assertEqual(names, ["Author"] * 3)

    def test_latest_first_matches_default_ordering(self):
        now = timezone.now()
        older = create_post("Older", self.author, now - timedelta(minutes=5))
        newer = create_post("Newer", self.author, now)

        self.assertEqual(list(Post.objects.latest_first()), [newer, older])
        self.assertEqual(list(Post.objects.all()), [newer, older])
