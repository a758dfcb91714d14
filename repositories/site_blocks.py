"""Repository for the singleton welcome/urgency HTML blocks."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models.site_block import SINGLETON_ID, SiteBlockMixin

from .base import Repository


class SiteBlockRepository(Repository):
    def __init__(self, session: Session, model: type[SiteBlockMixin]):
        super().__init__(session)
        self.model = model

    def get(self) -> SiteBlockMixin:
        """Return the stored block, or an unsaved empty one when none exists."""

        block = self.session.get(self.model, SINGLETON_ID)
        if block is None:
            return self.model(id=SINGLETON_ID, html="")
        return block

    def upsert(self, html: str) -> SiteBlockMixin:
        """Insert the singleton row or overwrite it in place."""

        block = self.session.merge(self.model(id=SINGLETON_ID, html=html))
        try:
            self.session.commit()
        except IntegrityError:
            # Another writer inserted the row first; overwrite it instead.
            self.session.rollback()
            block = self.session.get(self.model, SINGLETON_ID)
            block.html = html
            self._commit()
        return block
