from __future__ import annotations

import pytest
from django.test import Client

from accounts.models import User
from catalog.models import Lecturer, LearningModule


@pytest.mark.django_db
def test_admin_pages_render_for_staff():
    admin = User.objects.create_superuser(email="root@example.com", name="Root", password="password123")
    lec = Lecturer.objects.create(name="Ada", code="L-1")
    lec.learning_modules.add(LearningModule.objects.create(name="M", code="M-1"))

    c = Client()
    c.force_login(admin)
    for url in (
        "/admin/accounts/user/",
        f"/admin/accounts/user/{admin.pk}/change/",
        "/admin/catalog/lecturer/",
        f"/admin/catalog/lecturer/{lec.pk}/change/",
        "/admin/catalog/learningmodule/",
    ):
        assert c.get(url).status_code == 200, url
