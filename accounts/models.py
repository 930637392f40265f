"""Accounts models: the API user and its credentials.

`User` replaces Django's default auth user. It is identified by e-mail,
carries a display `name`, and holds at most one opaque API token at a
time. Tokens are issued by `accounts.tokens`; the model itself only
stores them.
"""
from __future__ import annotations

from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin
from django.db import models

from .managers import UserManager


class User(AbstractBaseUser, PermissionsMixin):
    """Account used to call the API.

    - `api_token`: current bearer token (80 hex chars) or null until issued
    - `email_verified_at`: drives the verified/unverified list filter
    - `is_staff` / `is_active`: Django admin access only
    """

    name = models.CharField(max_length=255)
    email = models.EmailField(
        max_length=255,
        unique=True,
        error_messages={"unique": "The email has already been taken."},
    )
    api_token = models.CharField(max_length=80, unique=True, null=True, blank=True, editable=False)
    email_verified_at = models.DateTimeField(null=True, blank=True)

    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    EMAIL_FIELD = "email"
    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["name"]

    class Meta:
        db_table = "users"
        ordering = ["id"]

    def __str__(self) -> str:  # pragma: no cover (string repr convenience)
        return f"{self.name} <{self.email}>"

    @property
    def is_verified(self) -> bool:
        return self.email_verified_at is not None
