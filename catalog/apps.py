from django.apps import AppConfig


class CatalogConfig(AppConfig):
    """App configuration for lecturers, learning modules, and their links."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "catalog"
