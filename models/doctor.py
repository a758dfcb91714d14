"""Doctor model definition."""

from . import db


class Doctor(db.Model):
    """A doctor shown on the practice site."""

    __tablename__ = "doctors"

    id = db.Column(db.Integer, primary_key=True)
    firstname = db.Column(db.String(120), nullable=False)
    lastname = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(50), nullable=False)
    agenda_url = db.Column(db.String(512), nullable=False)
    # Storage reference: a file name under UPLOAD_DIR or an inline data URI.
    image = db.Column(db.Text, nullable=True)

    holidays = db.relationship(
        "Holiday",
        back_populates="doctor",
        cascade="all, delete-orphan",
        order_by="Holiday.start_date",
    )

    @property
    def full_name(self) -> str:
        return f"{self.firstname} {self.lastname}"

    def to_dict(self, image_url: str | None = None) -> dict:
        """Serialize the doctor, with the image already resolved to a URL."""

        return {
            "id": self.id,
            "firstname": self.firstname,
            "lastname": self.lastname,
            "email": self.email,
            "phone": self.phone,
            "agendaUrl": self.agenda_url,
            "imageUrl": image_url,
        }

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<Doctor id={self.id} {self.full_name}>"
