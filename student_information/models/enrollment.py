import enum
import uuid

from ..extensions import db

class Grade(enum.Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"

class Enrollment(db.Model):
    __tablename__ = "enrollment"
    id = db.Column(db.Uuid, primary_key=True, default=uuid.uuid4)
    course_id = db.Column(db.Uuid, db.ForeignKey("course.id", ondelete="CASCADE"),
                          nullable=False, index=True)
    student_id = db.Column(db.Uuid, db.ForeignKey("student.id", ondelete="CASCADE"),
                           nullable=False, index=True)
    grade = db.Column(db.Enum(Grade, name="grade"))  # None until assessed
    __table_args__ = (
        db.UniqueConstraint("student_id", "course_id", name="uq_student_course"),
    )

    course = db.relationship("Course", back_populates="enrollments")
    student = db.relationship("Student", back_populates="enrollments")

    def __init__(self, **kwargs):
        # ids exist before the first flush
        kwargs.setdefault("id", uuid.uuid4())
        super().__init__(**kwargs)
