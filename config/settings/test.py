"""Test settings for Lectern.

Fast hashing and an in-memory database. The dummy cache keeps throttle
counters from leaking between tests.
"""
from .base import *  # noqa


DEBUG = False
ALLOWED_HOSTS = ["testserver", "localhost"]
SECRET_KEY = "test-insecure-key"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

# Throttle history is never stored, so rate limits never trip between tests.
CACHES = {
    "default": {"BACKEND": "django.core.cache.backends.dummy.DummyCache"},
}

LOGGING = {
    **LOGGING,  # noqa: F405
    "root": {"handlers": ["console"], "level": "ERROR"},
}
