"""URL routing for Lectern.

The REST API, its OpenAPI schema, and the interactive documentation are
mounted from the `api` app; the Django admin stays at /admin/.
"""
from django.contrib import admin
from django.urls import include, path
from django.conf import settings
from django.conf.urls.static import static


urlpatterns = [
    path("admin/", admin.site.urls),
    # REST API, schema and docs
    path("", include("api.urls")),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
