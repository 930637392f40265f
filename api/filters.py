"""Query-string filters for list endpoints."""
from __future__ import annotations

import django_filters

from accounts.models import User


class UserFilter(django_filters.FilterSet):
    """`?filter=verified|unverified` on e-mail verification.

    Any other value leaves the queryset as is rather than failing the
    request.
    """

    filter = django_filters.CharFilter(method="filter_verification", label="verified | unverified")

    class Meta:
        model = User
        fields = []

    def filter_verification(self, queryset, name, value):
        value = (value or "").strip().lower()
        if value == "verified":
            return queryset.filter(email_verified_at__isnull=False)
        if value == "unverified":
            return queryset.filter(email_verified_at__isnull=True)
        return queryset
