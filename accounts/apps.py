from django.apps import AppConfig


class AccountsConfig(AppConfig):
    """App configuration for accounts (users and API tokens)."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "accounts"
