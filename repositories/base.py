"""Shared plumbing for the SQLAlchemy-backed repositories."""

from __future__ import annotations

from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from errors import ConflictError, DuplicateEntity, StoreError
from utils.request_validation import fits_sql_integer


class Repository:
    """Base class holding the injected session."""

    def __init__(self, session: Session):
        self.session = session

    def _get_row(self, model, row_id: int):
        """Primary-key lookup; ids no row can carry simply match nothing."""

        if not fits_sql_integer(row_id):
            return None
        return self.session.get(model, row_id)

    def _commit(self, conflict: type[ConflictError] = DuplicateEntity) -> None:
        """Commit, translating driver errors into the API error taxonomy."""

        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise conflict() from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            current_app.logger.exception("Database commit failed")
            raise StoreError() from exc
