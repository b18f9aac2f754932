"""Course Model"""

from sqlalchemy import Column, String, Text, Integer, Enum, CheckConstraint
from sqlalchemy.orm import relationship

from admissions.models.base import BaseModel, StatusMixin
from admissions.models.enums import CourseType


class Course(BaseModel, StatusMixin):
    """
    A degree programme students are admitted into.
    The type code is part of every enrollment number issued for the course.
    """
    __tablename__ = "courses"
    __table_args__ = (
        CheckConstraint("duration_years > 0", name="ck_courses_duration_positive"),
    )

    name = Column(String(255), nullable=False)
    type = Column(
        Enum(CourseType, name="course_type", values_callable=lambda x: [e.value for e in x]),
        unique=True,
        nullable=False,
    )
    duration_years = Column(Integer, nullable=False)
    description = Column(Text, nullable=True)

    students = relationship("Student", back_populates="course")

    def __repr__(self) -> str:
        return f"<Course {self.type} ({self.duration_years}y)>"
