"""Tests for the admin user management endpoints and the credential store."""

from __future__ import annotations

import pytest

from conftest import create_user
from errors import DuplicateCredential, ValidationError
from models import db
from models.user import hash_password
from repositories.users import UserRepository


def test_list_users_sorted_without_secrets(app, client, admin_headers):
    with app.app_context():
        create_user("zoe")
        create_user("bram", role="admin")

    response = client.get("/users", headers=admin_headers)

    assert response.status_code == 200
    payload = response.get_json()
    assert [user["username"] for user in payload] == ["admin", "bram", "zoe"]
    assert all(set(user) == {"id", "username", "role"} for user in payload)


def test_list_users_requires_admin(client, user_headers):
    assert client.get("/users", headers=user_headers).status_code == 403


def test_create_user_defaults_to_admin_role(client, admin_headers):
    response = client.post(
        "/users", json={"username": "newuser", "password": "pw"}, headers=admin_headers
    )

    assert response.status_code == 201
    assert response.get_json() == {
        "id": response.get_json()["id"],
        "username": "newuser",
        "email": None,
        "role": "admin",
    }


def test_create_user_conflict_and_bad_role(client, admin_headers):
    body = {"username": "newuser", "password": "pw", "role": "user"}
    assert client.post("/users", json=body, headers=admin_headers).status_code == 201
    assert client.post("/users", json=body, headers=admin_headers).status_code == 409

    bad = client.post(
        "/users",
        json={"username": "other", "password": "pw", "role": "superuser"},
        headers=admin_headers,
    )
    assert bad.status_code == 400


def test_repository_create_and_lookup(app):
    with app.app_context():
        repository = UserRepository(db.session)
        user = repository.create("pieter", "pieter@example.com", hash_password("pw"), "admin")

        found = repository.find_by_username("pieter")
        assert found.id == user.id
        assert found.check_password("pw")
        assert repository.find_by_username("missing") is None
        assert repository.get(user.id).username == "pieter"


def test_repository_rejects_duplicates(app):
    with app.app_context():
        repository = UserRepository(db.session)
        repository.create("pieter", "pieter@example.com", hash_password("pw"), "admin")

        with pytest.raises(DuplicateCredential):
            repository.create("pieter", "other@example.com", hash_password("pw"), "user")
        with pytest.raises(DuplicateCredential):
            repository.create("someone", "Pieter@example.com", hash_password("pw"), "user")


def test_repository_rejects_unknown_role(app):
    with app.app_context():
        with pytest.raises(ValidationError):
            UserRepository(db.session).create("x", None, hash_password("pw"), "owner")
