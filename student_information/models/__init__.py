from ..extensions import db
from .people import Student
from .course import Course
from .enrollment import Enrollment, Grade

__all__ = ["Student", "Course", "Enrollment", "Grade"]
