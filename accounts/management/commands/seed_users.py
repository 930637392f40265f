"""Seed demo accounts for local development.

Creates an administrator, a handful of named users, and `--count`
numbered users. Every seeded account is verified and gets an API token.
Existing e-mails are left untouched so the command can be re-run.
"""
from __future__ import annotations

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from accounts.models import User
from accounts.tokens import issue_token

DEFAULT_PASSWORD = "password123"

NAMED_USERS = [
    ("John Doe", "john@example.com"),
    ("Jane Smith", "jane@example.com"),
    ("Bob Johnson", "bob@example.com"),
    ("Alice Brown", "alice@example.com"),
    ("Charlie Wilson", "charlie@example.com"),
]


class Command(BaseCommand):
    help = "Seed an administrator and demo users, each with an API token."

    def add_arguments(self, parser):
        parser.add_argument("--count", type=int, default=10, help="Number of numbered demo users to add.")
        parser.add_argument("--password", default=DEFAULT_PASSWORD, help="Password for every seeded account.")

    @transaction.atomic
    def handle(self, *args, **options):
        password = options["password"]
        now = timezone.now()

        admin, created = self._ensure(
            "Admin User", "admin@example.com", password, now, is_staff=True, is_superuser=True
        )
        seeded = int(created)
        for name, email in NAMED_USERS:
            _, created = self._ensure(name, email, password, now)
            seeded += int(created)
        for i in range(1, options["count"] + 1):
            _, created = self._ensure(f"Demo User {i}", f"demo{i}@example.com", password, now)
            seeded += int(created)

        self.stdout.write(self.style.SUCCESS(f"Seeded {seeded} user(s)."))
        self.stdout.write(f"Admin token: {admin.api_token}")

    def _ensure(self, name, email, password, verified_at, **extra):
        user = User.objects.filter(email__iexact=email).first()
        if user:
            return user, False
        user = User.objects.create_user(
            email=email, name=name, password=password, email_verified_at=verified_at, **extra
        )
        issue_token(user)
        return user, True
