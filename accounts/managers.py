from __future__ import annotations

from django.contrib.auth.base_user import BaseUserManager


class UserManager(BaseUserManager):
    """Create users keyed by e-mail; passwords always go through the hashers."""

    use_in_migrations = True

    def _create_user(self, email: str, name: str, password: str | None, **extra):
        if not email:
            raise ValueError("An e-mail address is required.")
        user = self.model(email=self.normalize_email(email).lower(), name=name, **extra)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email: str, name: str = "", password: str | None = None, **extra):
        extra.setdefault("is_staff", False)
        extra.setdefault("is_superuser", False)
        return self._create_user(email, name, password, **extra)

    def create_superuser(self, email: str, name: str = "", password: str | None = None, **extra):
        extra.setdefault("is_staff", True)
        extra.setdefault("is_superuser", True)
        if extra.get("is_staff") is not True or extra.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_staff=True and is_superuser=True.")
        return self._create_user(email, name, password, **extra)

    def get_by_natural_key(self, email: str):
        return self.get(email__iexact=email)

    def verified(self):
        return self.filter(email_verified_at__isnull=False)

    def unverified(self):
        return self.filter(email_verified_at__isnull=True)
