"""REST API views: registration, login, users, and the catalogue."""
from __future__ import annotations

import logging

from django.contrib.auth import authenticate
from drf_spectacular.utils import OpenApiParameter, extend_schema, extend_schema_view
from rest_framework import status, viewsets
from rest_framework.decorators import action, api_view
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle, ScopedRateThrottle
from rest_framework.views import APIView

from accounts.models import User
from accounts.tokens import issue_token
from catalog.models import Lecturer, LearningModule
from catalog import services
from .exceptions import InvalidCredentials
from .filters import UserFilter
from .serializers import (
    AuthTokenSerializer,
    LearningModuleIdsSerializer,
    LearningModuleSerializer,
    LecturerSerializer,
    LoginSerializer,
    MessageSerializer,
    RegisterSerializer,
    UserCreateSerializer,
    UserSerializer,
)

logger = logging.getLogger(__name__)


def _token_response(user: User, token: str, status_code: int) -> Response:
    return Response({"user": UserSerializer(user).data, "token": token}, status=status_code)


class RegisterView(APIView):
    permission_classes = [AllowAny]
    throttle_classes = [AnonRateThrottle, ScopedRateThrottle]
    throttle_scope = "login"

    @extend_schema(
        tags=["Auth"],
        summary="Register a new user",
        request=RegisterSerializer,
        responses={201: AuthTokenSerializer},
        auth=[],
    )
    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        token = issue_token(user)
        logger.info("Registered user %s", user.pk)
        return _token_response(user, token, status.HTTP_201_CREATED)


class LoginView(APIView):
    """Exchange e-mail and password for a fresh API token.

    Unknown e-mails and wrong passwords fail identically so the endpoint
    cannot be used to probe which accounts exist.
    """

    permission_classes = [AllowAny]
    throttle_classes = [AnonRateThrottle, ScopedRateThrottle]
    throttle_scope = "login"

    @extend_schema(
        tags=["Auth"],
        summary="Log in and rotate the API token",
        request=LoginSerializer,
        responses={200: AuthTokenSerializer, 401: MessageSerializer},
        auth=[],
    )
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = authenticate(
            request,
            email=serializer.validated_data["email"],
            password=serializer.validated_data["password"],
        )
        if user is None:
            logger.info("Failed login attempt")
            raise InvalidCredentials()
        token = issue_token(user)
        logger.info("User %s logged in", user.pk)
        return _token_response(user, token, status.HTTP_200_OK)


@extend_schema(tags=["Auth"], summary="Get the authenticated user", responses=UserSerializer)
@api_view(["GET"])
def current_user(request):
    return Response(UserSerializer(request.user).data)


@extend_schema_view(
    list=extend_schema(
        summary="List users",
        parameters=[
            OpenApiParameter("filter", str, enum=["verified", "unverified"], description="E-mail verification state."),
        ],
    ),
    create=extend_schema(summary="Create a user", request=UserCreateSerializer, responses={201: UserSerializer}),
    retrieve=extend_schema(summary="Get a user"),
    update=extend_schema(summary="Update a user"),
    partial_update=extend_schema(summary="Update a user"),
    destroy=extend_schema(summary="Delete a user"),
)
@extend_schema(tags=["User"])
class UserViewSet(viewsets.ModelViewSet):
    queryset = User.objects.all().order_by("id")
    serializer_class = UserSerializer
    filterset_class = UserFilter
    search_fields = ["name", "email"]
    ordering_fields = ["id", "name", "email", "created_at"]
    ordering = ["id"]

    def get_serializer_class(self):
        if self.action == "create":
            return UserCreateSerializer
        return UserSerializer

    def update(self, request, *args, **kwargs):
        # PUT accepts any subset of fields, same as PATCH.
        kwargs["partial"] = True
        return super().update(request, *args, **kwargs)

    def perform_destroy(self, instance):
        pk = instance.pk
        super().perform_destroy(instance)
        logger.info("Deleted user %s by %s", pk, self.request.user.pk)


class CatalogViewSet(viewsets.ModelViewSet):
    """Shared CRUD behaviour for lecturers and learning modules."""

    search_fields = ["name", "code"]
    ordering_fields = ["id", "name", "code", "created_at"]
    ordering = ["id"]

    def update(self, request, *args, **kwargs):
        kwargs["partial"] = True
        return super().update(request, *args, **kwargs)


@extend_schema_view(
    list=extend_schema(summary="List learning modules"),
    create=extend_schema(summary="Create a learning module"),
    retrieve=extend_schema(summary="Get a learning module"),
    update=extend_schema(summary="Update a learning module"),
    partial_update=extend_schema(summary="Update a learning module"),
    destroy=extend_schema(summary="Delete a learning module"),
)
@extend_schema(tags=["LearningModule"])
class LearningModuleViewSet(CatalogViewSet):
    queryset = LearningModule.objects.prefetch_related("lecturers").order_by("id")
    serializer_class = LearningModuleSerializer


@extend_schema_view(
    list=extend_schema(summary="List lecturers"),
    create=extend_schema(summary="Create a lecturer"),
    retrieve=extend_schema(summary="Get a lecturer"),
    update=extend_schema(summary="Update a lecturer"),
    partial_update=extend_schema(summary="Update a lecturer"),
    destroy=extend_schema(summary="Delete a lecturer"),
)
@extend_schema(tags=["Lecturer"])
class LecturerViewSet(CatalogViewSet):
    queryset = Lecturer.objects.prefetch_related("learning_modules").order_by("id")
    serializer_class = LecturerSerializer

    @extend_schema(
        summary="Attach learning modules to lecturer",
        request=LearningModuleIdsSerializer,
        responses={200: MessageSerializer},
    )
    @action(detail=True, methods=["post"], url_path="learning-modules", filter_backends=[])
    def learning_modules(self, request, pk=None):
        lecturer = self.get_object()
        serializer = LearningModuleIdsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        services.attach_learning_modules(lecturer, serializer.validated_data["learning_module_ids"])
        return Response({"message": "Learning modules attached successfully"})

    @extend_schema(
        summary="Detach learning modules from lecturer",
        request=LearningModuleIdsSerializer,
        responses={200: MessageSerializer},
    )
    @learning_modules.mapping.delete
    def detach_learning_modules(self, request, pk=None):
        lecturer = self.get_object()
        serializer = LearningModuleIdsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        services.detach_learning_modules(lecturer, serializer.validated_data["learning_module_ids"])
        return Response({"message": "Learning modules detached successfully"})
