"""User model definition."""

from datetime import UTC, datetime

from werkzeug.security import check_password_hash, generate_password_hash

from . import db


USER_ROLES = ("admin", "user")


def hash_password(password: str) -> str:
    """Return a salted hash for the given plaintext password."""

    return generate_password_hash(password)


class User(db.Model):
    """An account allowed to sign in to the admin backend."""

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(150), unique=True, nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(
        db.Enum(*USER_ROLES, name="user_role"),
        nullable=False,
        default="user",
        server_default=db.text("'user'"),
    )
    created_at = db.Column(
        db.DateTime, nullable=False, default=lambda: datetime.now(UTC)
    )

    def set_password(self, password: str) -> None:
        """Hash and store the password."""

        self.password_hash = hash_password(password)

    def check_password(self, password: str) -> bool:
        """Verify a password against the stored hash."""

        return check_password_hash(self.password_hash, password)

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "role": self.role,
        }

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<User {self.username}>"
