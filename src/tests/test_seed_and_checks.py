"""Tests for the seed_posts command and the posts system check."""

from __future__ import annotations

from io import StringIO
from unittest import mock

from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.template import TemplateDoesNotExist
from django.test import SimpleTestCase, TestCase

from posts.checks import index_template_is_loadable
from posts.models import Post
from tests.utils import create_author, create_post

User = get_user_model()


class SeedPostsCommandTests(TestCase):
    def seed(self, *args) -> str:
        out = StringIO()
        call_command("seed_posts", *args, stdout=out)
        return out.getvalue()

    def test_seed_creates_authors_and_posts(self):
        output = self.seed()

        self.assertIn("Post seed completed (4 new posts).", output)
        self.assertEqual(User.objects.count(), 3)
        self.assertEqual(Post.objects.count(), 4)

    def test_seeded_posts_are_backdated_in_feed_order(self):
        self.seed()

        titles = [post.title for post in Post.objects.for_index()]
        self.assertEqual(
            titles,
            ["On loops", "Just a hobby", "Finding the first bug", "Notes on the Analytical Engine"],
        )

    def test_seed_is_idempotent(self):
        self.seed()
        output = self.seed()

        self.assertIn("(0 new posts)", output)
        self.assertEqual(User.objects.count(), 3)
        self.assertEqual(Post.objects.count(), 4)

    def test_seeded_authors_can_authenticate(self):
        self.seed()

        ada = User.objects.get(email="ada@example.com")
        self.assertEqual(ada.name, "Ada")
        self.assertTrue(ada.check_password("adapass123"))

    def test_reset_removes_demo_data_but_keeps_other_authors(self):
        self.seed()
        ada = User.objects.get(email="ada@example.com")
        create_post("Extra demo post", ada)
        outsider = create_author("outsider@test.com", "Outsider")
        outsider_post = create_post("Outsider post", outsider)

        output = self.seed("--reset")

        self.assertIn("Seeded post data cleared.", output)
        self.assertFalse(Post.objects.filter(title="Extra demo post").exists())
        self.assertTrue(Post.objects.filter(pk=outsider_post.pk).exists())
        self.assertEqual(Post.objects.count(), 5)


class IndexTemplateCheckTests(SimpleTestCase):
    def test_passes_with_shipped_template(self):
        self.assertEqual(index_template_is_loadable(None), [])

    def test_reports_missing_template(self):
        with mock.patch("posts.checks.get_template", side_effect=TemplateDoesNotExist("posts/index.html")):
            errors = index_template_is_loadable(None)

        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].id, "posts.E001")
