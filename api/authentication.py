"""Bearer token authentication for the REST API.

Clients send `Authorization: Bearer <api_token>`. The token is looked up
by exact match against `User.api_token`; anything else is rejected with
401 before the view runs.
"""
from __future__ import annotations

from django.contrib.auth import get_user_model
from drf_spectacular.extensions import OpenApiAuthenticationExtension
from drf_spectacular.plumbing import build_bearer_security_scheme_object
from rest_framework import exceptions
from rest_framework.authentication import BaseAuthentication, get_authorization_header

User = get_user_model()

UNAUTHENTICATED = "Unauthenticated."


class ApiTokenAuthentication(BaseAuthentication):
    keyword = "Bearer"

    def authenticate(self, request):
        auth = get_authorization_header(request).split()
        if not auth or auth[0].lower() != self.keyword.lower().encode():
            return None
        if len(auth) != 2:
            raise exceptions.AuthenticationFailed(UNAUTHENTICATED)
        try:
            token = auth[1].decode()
        except UnicodeError:
            raise exceptions.AuthenticationFailed(UNAUTHENTICATED)
        return self.authenticate_credentials(token)

    def authenticate_credentials(self, token: str):
        user = User.objects.filter(api_token=token).first()
        if user is None or not user.is_active:
            raise exceptions.AuthenticationFailed(UNAUTHENTICATED)
        return (user, token)

    def authenticate_header(self, request):
        # A non-empty header makes DRF answer 401 rather than 403.
        return self.keyword


class ApiTokenScheme(OpenApiAuthenticationExtension):
    """Expose `ApiTokenAuthentication` as the `bearerAuth` scheme in OpenAPI."""

    target_class = "api.authentication.ApiTokenAuthentication"
    name = "bearerAuth"

    def get_security_definition(self, auto_schema):
        return build_bearer_security_scheme_object(header_name="Authorization", token_prefix="Bearer")
