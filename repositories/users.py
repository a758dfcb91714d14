"""Credential store backed by the ``users`` table."""

from __future__ import annotations

from sqlalchemy import func, or_, select

from errors import DuplicateCredential, ValidationError
from models.user import USER_ROLES, User

from .base import Repository


class UserRepository(Repository):
    def find_by_username(self, username: str) -> User | None:
        return self.session.scalar(select(User).where(User.username == username))

    def get(self, user_id: int) -> User | None:
        return self._get_row(User, user_id)

    def list_all(self) -> list[User]:
        return list(self.session.scalars(select(User).order_by(User.username.asc())))

    def create(
        self,
        username: str,
        email: str | None,
        password_hash: str,
        role: str,
    ) -> User:
        """Insert a new account; the password must already be hashed."""

        if role not in USER_ROLES:
            raise ValidationError('role must be "admin" or "user".')

        clauses = [User.username == username]
        if email:
            clauses.append(func.lower(User.email) == email.lower())
        if self.session.scalar(select(User.id).where(or_(*clauses))) is not None:
            raise DuplicateCredential()

        user = User(
            username=username,
            email=email or None,
            password_hash=password_hash,
            role=role,
        )
        self.session.add(user)
        self._commit(conflict=DuplicateCredential)
        return user
