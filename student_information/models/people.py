import uuid
from datetime import datetime

from ..extensions import db

class Student(db.Model):
    __tablename__ = "student"
    id = db.Column(db.Uuid, primary_key=True, default=uuid.uuid4)
    last_name = db.Column(db.String(64))
    first_mid_name = db.Column(db.String(64))
    enrollment_date = db.Column(db.DateTime, nullable=False, default=datetime.now)

    enrollments = db.relationship(
        "Enrollment", back_populates="student", cascade="all, delete-orphan"
    )

    def __init__(self, **kwargs):
        kwargs.setdefault("id", uuid.uuid4())
        super().__init__(**kwargs)
