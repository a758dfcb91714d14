"""Shared pytest fixtures for the application tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app import create_app  # noqa: E402
from auth.tokens import issue_token  # noqa: E402
from config import Config  # noqa: E402
from models import db  # noqa: E402
from models.user import User  # noqa: E402


class _BaseTestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    JWT_SECRET_KEY = "test-secret-key-that-is-long-enough-for-hs256"
    RATELIMIT_ENABLED = False
    IMAGE_STORAGE = "file"
    UPLOADS_BASE_URL = None


def build_test_app(tmp_path: Path, **overrides) -> Flask:
    upload_dir = tmp_path / "uploads"

    class TestConfig(_BaseTestConfig):
        UPLOAD_DIR = str(upload_dir)

    for key, value in overrides.items():
        setattr(TestConfig, key, value)

    application = create_app(TestConfig)
    with application.app_context():
        db.create_all()
    return application


@pytest.fixture()
def app(tmp_path) -> Flask:
    """Create a Flask application instance for tests."""

    application = build_test_app(tmp_path)

    yield application

    with application.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Return a test client for the Flask app."""

    return app.test_client()


def create_user(
    username: str,
    password: str = "Secret123",
    role: str = "user",
    email: str | None = None,
) -> User:
    """Persist a user; call inside an app context."""

    user = User(username=username, email=email, role=role)
    user.set_password(password)
    db.session.add(user)
    db.session.commit()
    return user


def auth_headers(app: Flask, username: str, role: str = "user") -> dict[str, str]:
    """Create a user and return bearer headers for it."""

    with app.app_context():
        user = create_user(username, role=role)
        token = issue_token(user)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def admin_headers(app: Flask) -> dict[str, str]:
    return auth_headers(app, "admin", role="admin")


@pytest.fixture()
def user_headers(app: Flask) -> dict[str, str]:
    return auth_headers(app, "reader", role="user")
