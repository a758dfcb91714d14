"""Tests for the User model helpers."""

from models import db
from models.user import User


def test_user_password_helpers(app):
    """Passwords are hashed on set and verified against the hash."""

    with app.app_context():
        user = User(username="helper", role="user")
        user.set_password("password123")
        db.session.add(user)
        db.session.commit()

        assert user.password_hash != "password123"
        assert user.check_password("password123") is True
        assert user.check_password("wrong") is False
        assert user.is_admin is False
        assert user.created_at is not None

        user.role = "admin"
        db.session.commit()
        db.session.refresh(user)

        assert user.is_admin is True
        assert "password_hash" not in user.to_dict()
