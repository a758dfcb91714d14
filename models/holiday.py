"""Holiday model definition."""

from . import db


class Holiday(db.Model):
    """A period during which a doctor is away."""

    __tablename__ = "holidays"

    id = db.Column(db.Integer, primary_key=True)
    doctor_id = db.Column(
        db.Integer,
        db.ForeignKey("doctors.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=False)

    doctor = db.relationship("Doctor", back_populates="holidays")

    def to_dict(self, include_doctor: bool = True) -> dict:
        data = {
            "id": self.id,
            "doctorId": self.doctor_id,
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
        }
        if include_doctor:
            data["doctorName"] = self.doctor.full_name if self.doctor else None
        return data

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return (
            f"<Holiday id={self.id} doctor_id={self.doctor_id} "
            f"{self.start_date}..{self.end_date}>"
        )
