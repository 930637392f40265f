"""API routes for Lectern.

REST endpoints live under /api/ without trailing slashes. The OpenAPI
schema and interactive documentation are public.
"""
from django.urls import path, include
from rest_framework.routers import DefaultRouter
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularSwaggerView,
    SpectacularRedocView,
)


from .views import (
    LearningModuleViewSet,
    LecturerViewSet,
    LoginView,
    RegisterView,
    UserViewSet,
    current_user,
)

router = DefaultRouter(trailing_slash=False)
router.register(r"api/users", UserViewSet, basename="users")
router.register(r"api/learning-modules", LearningModuleViewSet, basename="learning-modules")
router.register(r"api/lecturers", LecturerViewSet, basename="lecturers")

urlpatterns = [
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
    path("api/register", RegisterView.as_view(), name="register"),
    path("api/login", LoginView.as_view(), name="login"),
    path("api/user", current_user, name="current-user"),
    path("", include(router.urls)),
]
