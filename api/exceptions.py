"""Uniform error bodies for the REST API.

- validation failures: 422 with a field -> messages mapping under `errors`
- authentication failures: 401 with a generic `message`; a missing token
  reads the same as a bad one
- missing resources: 404 with a fixed `message` that does not name the model
Anything DRF does not recognise is left to Django (500).
"""
from __future__ import annotations

from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.views import exception_handler

from .authentication import UNAUTHENTICATED

INVALID_DATA = "The given data was invalid."


class InvalidCredentials(exceptions.AuthenticationFailed):
    default_detail = "Invalid credentials"
    default_code = "invalid_credentials"


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, exceptions.ValidationError):
        errors = response.data
        if not isinstance(errors, dict):
            errors = {"non_field_errors": errors}
        response.status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
        response.data = {"message": INVALID_DATA, "errors": errors}
        return response

    if isinstance(exc, exceptions.NotAuthenticated):
        response.data = {"message": UNAUTHENTICATED}
        return response

    if isinstance(exc, (Http404, exceptions.NotFound)):
        response.data = {"message": str(exceptions.NotFound.default_detail)}
        return response

    detail = response.data.get("detail") if isinstance(response.data, dict) else None
    if detail is not None:
        response.data = {"message": str(detail)}
    return response
