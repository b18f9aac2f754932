"""Models Package - Export all models for easy imports"""

from admissions.models.base import BaseModel, StatusMixin
from admissions.models.enums import CourseType, Gender
from admissions.models.course import Course
from admissions.models.student import Student
from admissions.models.enrollment_counter import EnrollmentCounter


__all__ = [
    # Base classes
    "BaseModel",
    "StatusMixin",

    # Enums
    "CourseType",
    "Gender",

    # Academic
    "Course",
    "Student",
    "EnrollmentCounter",
]
