from django.apps import AppConfig


class ApiConfig(AppConfig):
    """App configuration for the REST API layer."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "api"

    def ready(self) -> None:  # pragma: no cover (import-time hook)
        # Register the OpenAPI extension for bearer token authentication.
        from . import authentication  # noqa: F401
        return super().ready()
