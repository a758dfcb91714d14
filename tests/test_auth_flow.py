"""Tests covering login, registration and the request guard."""

from __future__ import annotations

from datetime import timedelta

import pytest
from flask.testing import FlaskClient

from auth.tokens import issue_token
from conftest import create_user
from models import db
from models.user import User


def _login(client: FlaskClient, username: str, password: str) -> str:
    response = client.post("/auth/login", json={"username": username, "password": password})
    assert response.status_code == 200
    return response.get_json()["token"]


def test_login_returns_token(app, client: FlaskClient):
    """Users should receive a token when providing valid credentials."""

    with app.app_context():
        create_user("frontdesk", "Desk2024!", email="frontdesk@example.com")

    response = client.post("/auth/login", json={"username": "frontdesk", "password": "Desk2024!"})

    assert response.status_code == 200
    data = response.get_json()
    assert data["token"]
    assert data["user"] == {
        "id": data["user"]["id"],
        "username": "frontdesk",
        "email": "frontdesk@example.com",
        "role": "user",
    }
    assert "password" not in str(data)


@pytest.mark.parametrize(
    "payload, status_code",
    [
        ({"username": "frontdesk"}, 400),
        ({"password": "Desk2024!"}, 400),
        ({}, 400),
        ({"username": "frontdesk", "password": "wrong"}, 401),
        ({"username": "nobody", "password": "Desk2024!"}, 401),
    ],
)
def test_login_validation(app, client: FlaskClient, payload, status_code):
    """Login endpoint should validate request bodies and credentials."""

    with app.app_context():
        create_user("frontdesk", "Desk2024!")

    response = client.post("/auth/login", json=payload)

    assert response.status_code == status_code
    assert "error" in response.get_json()


def test_registered_admin_can_use_admin_routes(client: FlaskClient, admin_headers):
    """Register alice, log in as alice, then create a doctor with her token."""

    response = client.post(
        "/auth/register",
        json={"username": "alice", "email": "alice@example.com", "password": "pw1"},
        headers=admin_headers,
    )
    assert response.status_code == 201
    assert response.get_json() == {
        "id": response.get_json()["id"],
        "username": "alice",
        "email": "alice@example.com",
        "role": "admin",
    }

    token = _login(client, "alice", "pw1")
    response = client.post(
        "/doctors",
        json={
            "firstname": "A",
            "lastname": "B",
            "email": "a@b.com",
            "phone": "1",
            "agendaUrl": "http://x",
        },
        headers={"Authorization": f"Bearer {token}"},
    )

    assert response.status_code == 201
    assert response.get_json()["imageUrl"] is None


def test_register_duplicate_username_conflicts(client: FlaskClient, admin_headers):
    body = {"username": "alice", "email": "alice@example.com", "password": "pw1"}
    first = client.post("/auth/register", json=body, headers=admin_headers)
    second = client.post(
        "/auth/register",
        json={**body, "email": "other@example.com"},
        headers=admin_headers,
    )

    assert first.status_code == 201
    assert second.status_code == 409


def test_register_duplicate_email_conflicts(client: FlaskClient, admin_headers):
    client.post(
        "/auth/register",
        json={"username": "alice", "email": "alice@example.com", "password": "pw1"},
        headers=admin_headers,
    )
    response = client.post(
        "/auth/register",
        json={"username": "bob", "email": "ALICE@example.com", "password": "pw2"},
        headers=admin_headers,
    )

    assert response.status_code == 409


@pytest.mark.parametrize(
    "payload",
    [
        {"username": "bob", "password": "pw"},
        {"username": "bob", "email": "bob@example.com"},
        {"username": "bob", "email": "bob@example.com", "password": "pw", "role": "owner"},
    ],
)
def test_register_rejects_invalid_payloads(client: FlaskClient, admin_headers, payload):
    response = client.post("/auth/register", json=payload, headers=admin_headers)

    assert response.status_code == 400


def test_register_requires_admin(app, client: FlaskClient, user_headers):
    response = client.post(
        "/auth/register",
        json={"username": "bob", "email": "bob@example.com", "password": "pw"},
        headers=user_headers,
    )

    assert response.status_code == 403
    with app.app_context():
        assert db.session.query(User).filter_by(username="bob").first() is None


def test_register_stores_hashed_password(app, client: FlaskClient, admin_headers):
    client.post(
        "/auth/register",
        json={"username": "carol", "email": "carol@example.com", "password": "pw3", "role": "user"},
        headers=admin_headers,
    )

    with app.app_context():
        user = db.session.query(User).filter_by(username="carol").one()
        assert user.role == "user"
        assert user.password_hash != "pw3"
        assert user.check_password("pw3")


def test_missing_authorization_header(client: FlaskClient):
    response = client.get("/welcome")

    assert response.status_code == 401
    assert response.get_json()["error"] == "Missing Authorization header."
    assert response.get_json()["request_id"] == response.headers["X-Request-ID"]


@pytest.mark.parametrize("header", ["Bearer", "Token abc", "Bearer a b", "bearer abc"])
def test_malformed_authorization_header(client: FlaskClient, header):
    response = client.get("/welcome", headers={"Authorization": header})

    assert response.status_code == 401
    assert response.get_json()["error"] == "Malformed Authorization header."


def test_invalid_token_is_rejected(client: FlaskClient):
    response = client.get("/welcome", headers={"Authorization": "Bearer not-a-token"})

    assert response.status_code == 401
    assert response.get_json()["error"] == "Invalid or expired token."


def test_expired_token_is_rejected(app, client: FlaskClient):
    with app.app_context():
        user = create_user("old", role="admin")
        token = issue_token(user, expires_delta=timedelta(seconds=-1))

    response = client.get("/users", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.get_json()["error"] == "Invalid or expired token."


def test_tampered_token_is_rejected(app, client: FlaskClient):
    with app.app_context():
        user = create_user("eve", role="user")
        token = issue_token(user)

    header, payload, signature = token.split(".")
    flipped = ("A" if signature[0] != "A" else "B") + signature[1:]
    response = client.get(
        "/welcome", headers={"Authorization": f"Bearer {header}.{payload}.{flipped}"}
    )

    assert response.status_code == 401


def test_token_for_deleted_user_is_rejected(app, client: FlaskClient):
    with app.app_context():
        user = create_user("ghost", role="admin")
        token = issue_token(user)
        db.session.delete(user)
        db.session.commit()

    response = client.get("/welcome", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.get_json()["error"] == "Invalid or expired token."


def test_role_is_read_from_live_user(app, client: FlaskClient):
    with app.app_context():
        user = create_user("demoted", role="admin")
        token = issue_token(user)
        user.role = "user"
        db.session.commit()

    response = client.get("/users", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 403
