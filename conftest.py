import io
import logging

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile


@pytest.fixture(autouse=True)
def silence_django_request_logger():
    """Reduce noise from expected 4xx in passing tests.

    Many tests intentionally exercise 401/404/422 paths. Django logs these
    at WARNING via 'django.request'. Lower that logger to ERROR during
    tests to avoid clutter.
    """
    logger = logging.getLogger("django.request")
    old = logger.level
    logger.setLevel(logging.ERROR)
    try:
        yield
    finally:
        logger.setLevel(old)


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    """Store uploaded photos in a per-test directory."""
    settings.MEDIA_ROOT = tmp_path / "media"
    return settings.MEDIA_ROOT


@pytest.fixture
def user(db):
    from accounts.models import User

    return User.objects.create_user(email="owner@example.com", name="Owner", password="password123")


@pytest.fixture
def token(user):
    from accounts.tokens import issue_token

    return issue_token(user)


@pytest.fixture
def client_anon():
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def auth_client(token):
    from rest_framework.test import APIClient

    c = APIClient()
    c.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    return c


@pytest.fixture
def make_photo():
    """Build a small in-memory image upload (Pillow-encoded)."""

    def _make(name: str = "photo.png", fmt: str = "PNG", color=(200, 30, 30)):
        from PIL import Image

        buf = io.BytesIO()
        Image.new("RGB", (8, 8), color).save(buf, format=fmt)
        content_type = {"PNG": "image/png", "JPEG": "image/jpeg", "GIF": "image/gif"}[fmt]
        return SimpleUploadedFile(name, buf.getvalue(), content_type=content_type)

    return _make
