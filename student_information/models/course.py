import uuid

from ..extensions import db

class Course(db.Model):
    __tablename__ = "course"
    id = db.Column(db.Uuid, primary_key=True, default=uuid.uuid4)
    title = db.Column(db.String(128))
    credits = db.Column(db.Integer, nullable=False, default=0)

    enrollments = db.relationship(
        "Enrollment", back_populates="course", cascade="all, delete-orphan"
    )

    def __init__(self, **kwargs):
        kwargs.setdefault("id", uuid.uuid4())
        super().__init__(**kwargs)
