from __future__ import annotations

import pytest
from django.utils import timezone

from accounts.models import User


def _make(n: int, **extra):
    return [
        User.objects.create_user(email=f"user{i}@example.com", name=f"User {i}", password="password123", **extra)
        for i in range(n)
    ]


@pytest.mark.django_db
def test_list_is_paginated_ten_per_page(auth_client):
    _make(15)  # plus the authenticated owner
    r = auth_client.get("/api/users")
    assert r.status_code == 200
    data = r.json()
    assert data["count"] == 16
    assert data["per_page"] == 10
    assert data["current_page"] == 1
    assert len(data["results"]) == 10
    assert {"id", "name", "email"} <= set(data["results"][0])

    ids = [row["id"] for row in data["results"]]
    assert ids == sorted(ids)

    r2 = auth_client.get("/api/users", {"page": 2})
    assert len(r2.json()["results"]) == 6
    assert r2.json()["current_page"] == 2


@pytest.mark.django_db
def test_list_never_exposes_secrets(auth_client):
    r = auth_client.get("/api/users")
    for row in r.json()["results"]:
        assert "password" not in row
        assert "api_token" not in row


@pytest.mark.django_db
def test_search_matches_name_or_email(auth_client):
    User.objects.create_user(email="john@example.com", name="John Doe", password="password123")
    User.objects.create_user(email="jane@example.com", name="Jane Smith", password="password123")

    r = auth_client.get("/api/users", {"search": "John"})
    assert r.status_code == 200
    assert [row["name"] for row in r.json()["results"]] == ["John Doe"]

    r2 = auth_client.get("/api/users", {"search": "jane@"})
    assert [row["email"] for row in r2.json()["results"]] == ["jane@example.com"]


@pytest.mark.django_db
def test_filter_verified_and_unverified(auth_client):
    User.objects.create_user(email="v@example.com", name="V", password="password123", email_verified_at=timezone.now())
    User.objects.create_user(email="u@example.com", name="U", password="password123")

    verified = auth_client.get("/api/users", {"filter": "verified"}).json()["results"]
    assert [row["email"] for row in verified] == ["v@example.com"]

    unverified = auth_client.get("/api/users", {"filter": "unverified"}).json()["results"]
    assert {row["email"] for row in unverified} == {"owner@example.com", "u@example.com"}


@pytest.mark.django_db
def test_unknown_filter_value_is_ignored(auth_client):
    _make(2)
    r = auth_client.get("/api/users", {"filter": "bogus"})
    assert r.status_code == 200
    assert r.json()["count"] == 3


@pytest.mark.django_db
def test_store_creates_user_without_token(auth_client):
    r = auth_client.post(
        "/api/users",
        {"name": "Test User", "email": "test@example.com", "password": "password123"},
        format="json",
    )
    assert r.status_code == 201
    body = r.json()
    assert body["name"] == "Test User" and body["email"] == "test@example.com"
    assert "password" not in body and "token" not in body

    created = User.objects.get(email="test@example.com")
    assert created.check_password("password123")
    assert created.api_token is None


@pytest.mark.django_db
def test_store_validation_fails(auth_client):
    r = auth_client.post("/api/users", {"name": "", "email": "invalid-email", "password": "123"}, format="json")
    assert r.status_code == 422
    assert {"name", "email", "password"} <= set(r.json()["errors"])
    assert User.objects.count() == 1


@pytest.mark.django_db
def test_store_requires_password(auth_client):
    r = auth_client.post("/api/users", {"name": "N", "email": "n@example.com"}, format="json")
    assert r.status_code == 422
    assert "password" in r.json()["errors"]


@pytest.mark.django_db
def test_store_duplicate_email_does_not_mutate(auth_client):
    r = auth_client.post(
        "/api/users",
        {"name": "Dup", "email": "owner@example.com", "password": "password123"},
        format="json",
    )
    assert r.status_code == 422
    assert r.json()["errors"]["email"] == ["The email has already been taken."]
    assert User.objects.count() == 1


@pytest.mark.django_db
def test_show_returns_user(auth_client):
    (other,) = _make(1)
    r = auth_client.get(f"/api/users/{other.id}")
    assert r.status_code == 200
    assert r.json()["id"] == other.id
    assert r.json()["name"] == other.name
    assert r.json()["email"] == other.email


@pytest.mark.django_db
def test_show_user_not_found(auth_client):
    r = auth_client.get("/api/users/999")
    assert r.status_code == 404
    assert "message" in r.json()


@pytest.mark.django_db
def test_update_user(auth_client):
    (other,) = _make(1)
    r = auth_client.put(
        f"/api/users/{other.id}",
        {"name": "Updated Name", "email": "updated@example.com"},
        format="json",
    )
    assert r.status_code == 200
    assert r.json()["name"] == "Updated Name"
    assert r.json()["email"] == "updated@example.com"
    other.refresh_from_db()
    assert (other.name, other.email) == ("Updated Name", "updated@example.com")


@pytest.mark.django_db
def test_update_user_with_password(auth_client):
    (other,) = _make(1)
    r = auth_client.put(f"/api/users/{other.id}", {"password": "newpassword123"}, format="json")
    assert r.status_code == 200
    other.refresh_from_db()
    assert other.check_password("newpassword123")
    assert other.name == "User 0"


@pytest.mark.django_db
def test_update_keeps_own_email(auth_client):
    (other,) = _make(1)
    r = auth_client.put(f"/api/users/{other.id}", {"email": other.email, "name": "Same"}, format="json")
    assert r.status_code == 200


@pytest.mark.django_db
def test_update_rejects_email_of_another_user(auth_client):
    (other,) = _make(1)
    r = auth_client.patch(f"/api/users/{other.id}", {"email": "owner@example.com"}, format="json")
    assert r.status_code == 422
    other.refresh_from_db()
    assert other.email == "user0@example.com"


@pytest.mark.django_db
def test_update_user_not_found(auth_client):
    r = auth_client.put("/api/users/999", {"name": "Updated Name"}, format="json")
    assert r.status_code == 404


@pytest.mark.django_db
def test_destroy_deletes_user(auth_client):
    (other,) = _make(1)
    r = auth_client.delete(f"/api/users/{other.id}")
    assert r.status_code == 204
    assert not User.objects.filter(pk=other.id).exists()


@pytest.mark.django_db
def test_destroy_user_not_found(auth_client):
    before = User.objects.count()
    r = auth_client.delete("/api/users/999")
    assert r.status_code == 404
    assert User.objects.count() == before


@pytest.mark.django_db
def test_page_size_cannot_be_changed_by_client(auth_client):
    _make(15)
    data = auth_client.get("/api/users", {"page_size": 50, "per_page": 50}).json()
    assert data["per_page"] == 10
    assert len(data["results"]) == 10

    second = auth_client.get("/api/users", {"page": 2}).json()
    assert second["current_page"] == 2
    assert len(second["results"]) == 6
