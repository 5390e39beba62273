"""Seed demo authors and posts for the feed."""

from datetime import timedelta

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from accounts.managers import UserManager
from posts.models import Post

DEMO_AUTHORS = [
    ("ada@example.com", "Ada", "adapass123"),
    ("grace@example.com", "Grace", "gracepass123"),
    ("linus@example.com", "Linus", "linuspass123"),
]

# (author email, title, body, age in hours)
DEMO_POSTS = [
    ("ada@example.com", "Notes on the Analytical Engine", "Numbers are not the only thing it can weave.", 72),
    ("grace@example.com", "Finding the first bug", "It was a moth, taped into the logbook.", 48),
    ("linus@example.com", "Just a hobby", "Nothing big and professional.", 24),
    ("ada@example.com", "On loops", "Repetition, with a variable changing each time.", 2),
]


def create_demo_authors() -> dict:
    """Create demo authors if missing and return an email->User map."""
    User = get_user_model()
    authors = {}
    for email, display_name, password in DEMO_AUTHORS:
        author, _ = User.objects.get_or_create(
            email=email,
            defaults={
                "display_name": display_name,
                "password_hash": UserManager.hash_password(password),
            },
        )
        authors[email] = author
    return authors


def create_demo_posts(authors: dict) -> int:
    """Create demo posts with staggered timestamps; return how many were new."""
    now = timezone.now()
    created_count = 0
    for email, title, body, age_hours in DEMO_POSTS:
        post, created = Post.objects.get_or_create(
            title=title,
            author=authors[email],
            defaults={"body": body},
        )
        if created:
            # auto_now_add ignores explicit values, so backdate after insert.
            Post.objects.filter(pk=post.pk).update(created_at=now - timedelta(hours=age_hours))
            created_count += 1
    return created_count


class Command(BaseCommand):
    """Management command to seed demo authors and posts."""

    help = (
        "Seed demo authors and posts for the post feed. "
        "Use --reset to clear previously seeded data first."
    )

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Delete the demo authors (and, by cascade, their posts) before seeding.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        """Entrypoint for the management command."""
        if options.get("reset"):
            self._reset_seeded_data()

        self.stdout.write("Seeding posts...")
        authors = create_demo_authors()
        created = create_demo_posts(authors)
        self.stdout.write(self.style.SUCCESS(f"Post seed completed ({created} new posts)."))

    def _reset_seeded_data(self) -> None:
        """Remove the demo authors; their posts are cascaded via FK."""
        self.stdout.write("Resetting previously seeded posts...")
        User = get_user_model()
        User.objects.filter(email__in=[email for email, _, _ in DEMO_AUTHORS]).delete()
        self.stdout.write(self.style.WARNING("Seeded post data cleared."))
