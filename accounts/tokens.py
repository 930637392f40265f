"""Opaque API token issuance.

A token is 40 bytes from the OS CSPRNG, hex-encoded to 80 characters.
Each user holds a single active token; issuing a new one overwrites the
previous value, which invalidates it immediately.
"""
from __future__ import annotations

import logging
import secrets

from .models import User

logger = logging.getLogger(__name__)

TOKEN_BYTES = 40
TOKEN_LENGTH = TOKEN_BYTES * 2


def generate_api_token() -> str:
    return secrets.token_hex(TOKEN_BYTES)


def issue_token(user: User) -> str:
    """Store a fresh token on `user` and return it."""
    token = generate_api_token()
    user.api_token = token
    user.save(update_fields=["api_token", "updated_at"])
    logger.debug("Issued API token for user %s", user.pk)
    return token
