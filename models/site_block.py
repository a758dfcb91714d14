"""Singleton HTML blocks edited from the admin panel."""

from . import db


SINGLETON_ID = 1


class SiteBlockMixin:
    """A table that holds at most one row, always with id 1."""

    id = db.Column(db.Integer, primary_key=True, default=SINGLETON_ID)
    html = db.Column(db.Text, nullable=False, default="")

    def to_dict(self) -> dict:
        return {"id": self.id, "html": self.html}


class Welcome(SiteBlockMixin, db.Model):
    __tablename__ = "welcome"
    __table_args__ = (db.CheckConstraint("id = 1", name="ck_welcome_singleton"),)


class Urgency(SiteBlockMixin, db.Model):
    __tablename__ = "urgency"
    __table_args__ = (db.CheckConstraint("id = 1", name="ck_urgency_singleton"),)
