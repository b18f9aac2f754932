"""Student Model"""

from sqlalchemy import Column, String, Text, Integer, Enum, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from admissions.models.base import BaseModel, StatusMixin
from admissions.models.enums import Gender


class Student(BaseModel, StatusMixin):
    """
    An admitted student.
    enrollment_number is assigned once at admission and never changes;
    deactivated students keep their number and email.
    """
    __tablename__ = "students"

    enrollment_number = Column(String(20), unique=True, nullable=False, index=True)

    # Personal Information
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=True)
    phone = Column(String(20), nullable=False)
    age = Column(Integer, nullable=False)
    gender = Column(
        Enum(Gender, name="gender", values_callable=lambda x: [e.value for e in x]),
        nullable=False,
    )
    address = Column(Text, nullable=False)

    # Academic
    course_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("courses.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    admission_year = Column(Integer, nullable=False, index=True)
    passout_year = Column(Integer, nullable=False)

    # Attribution
    created_by = Column(Uuid(as_uuid=True), nullable=False, index=True)
    idempotency_key = Column(String(64), unique=True, nullable=True)

    course = relationship("Course", back_populates="students")

    def __repr__(self) -> str:
        return f"<Student {self.enrollment_number}>"
