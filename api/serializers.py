"""Serializers for the REST API.

Each write operation has its own declared schema; validation runs before
anything is written. Secrets (password hash, API token) are never part of
a user representation; the token only appears in the register/login
envelope built by the views.
"""
from __future__ import annotations

from django.contrib.auth import password_validation
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers
from rest_framework.validators import UniqueValidator

from accounts.models import User
from catalog.models import Lecturer, LearningModule
from catalog.services import replace_photo

EMAIL_TAKEN = "The email has already been taken."


def _email_field(**kwargs) -> serializers.EmailField:
    return serializers.EmailField(
        max_length=255,
        validators=[UniqueValidator(queryset=User.objects.all(), lookup="iexact", message=EMAIL_TAKEN)],
        **kwargs,
    )


def _check_password(value: str, user: User | None = None) -> str:
    try:
        password_validation.validate_password(value, user)
    except DjangoValidationError as exc:
        raise serializers.ValidationError(list(exc.messages))
    return value


class UserSerializer(serializers.ModelSerializer):
    """Public user fields; also used for partial updates."""

    email = _email_field(required=False)
    password = serializers.CharField(write_only=True, required=False, trim_whitespace=False)

    class Meta:
        model = User
        fields = ("id", "name", "email", "password", "email_verified_at", "created_at", "updated_at")
        read_only_fields = ("email_verified_at", "created_at", "updated_at")

    def validate_email(self, value: str) -> str:
        return value.strip().lower()

    def validate_password(self, value: str) -> str:
        return _check_password(value, self.instance)

    def create(self, validated_data):
        password = validated_data.pop("password")
        return User.objects.create_user(password=password, **validated_data)

    def update(self, instance, validated_data):
        password = validated_data.pop("password", None)
        if password:
            instance.set_password(password)
        return super().update(instance, validated_data)


class UserCreateSerializer(UserSerializer):
    email = _email_field()
    password = serializers.CharField(write_only=True, trim_whitespace=False)


class RegisterSerializer(UserCreateSerializer):
    password_confirmation = serializers.CharField(write_only=True, trim_whitespace=False)

    class Meta(UserCreateSerializer.Meta):
        fields = UserCreateSerializer.Meta.fields + ("password_confirmation",)

    def validate(self, attrs):
        if attrs.get("password") != attrs.pop("password_confirmation", None):
            raise serializers.ValidationError({"password": ["The password confirmation does not match."]})
        return attrs


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(trim_whitespace=False)

    def validate_email(self, value: str) -> str:
        return value.strip().lower()


class AuthTokenSerializer(serializers.Serializer):
    """Response envelope for register/login (documentation only)."""

    user = UserSerializer()
    token = serializers.CharField(min_length=80, max_length=80)


class MessageSerializer(serializers.Serializer):
    message = serializers.CharField()


class LecturerSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Lecturer
        fields = ("id", "name", "code", "photo")


class LearningModuleSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = LearningModule
        fields = ("id", "name", "code", "description", "photo")


class PhotoReplaceMixin:
    """Delete the stored photo before a newly uploaded one replaces it."""

    def update(self, instance, validated_data):
        upload = validated_data.pop("photo", None)
        if upload:
            replace_photo(instance, upload)
        return super().update(instance, validated_data)


class LecturerSerializer(PhotoReplaceMixin, serializers.ModelSerializer):
    learning_modules = LearningModuleSummarySerializer(many=True, read_only=True)

    class Meta:
        model = Lecturer
        fields = ("id", "name", "code", "photo", "learning_modules", "created_at", "updated_at")
        read_only_fields = ("created_at", "updated_at")


class LearningModuleSerializer(PhotoReplaceMixin, serializers.ModelSerializer):
    lecturers = LecturerSummarySerializer(many=True, read_only=True)

    class Meta:
        model = LearningModule
        fields = ("id", "name", "code", "description", "photo", "lecturers", "created_at", "updated_at")
        read_only_fields = ("created_at", "updated_at")


class LearningModuleIdsSerializer(serializers.Serializer):
    learning_module_ids = serializers.ListField(
        child=serializers.PrimaryKeyRelatedField(
            queryset=LearningModule.objects.all(),
            error_messages={
                "does_not_exist": "The selected learning module id {pk_value} is invalid.",
                "incorrect_type": "The learning module ids must be integers.",
            },
        ),
        allow_empty=False,
    )
