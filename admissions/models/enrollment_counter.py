"""Enrollment Counter Model"""

from sqlalchemy import Column, Integer, Enum, DateTime, CheckConstraint

from admissions.database import Base
from admissions.models.enums import CourseType
from admissions.utils.time import get_utc_now


class EnrollmentCounter(Base):
    """
    Last sequence number issued for one (course type, admission year) partition.

    Rows are created lazily by the first allocation in a partition and only
    ever incremented afterwards.
    """
    __tablename__ = "enrollment_counters"
    __table_args__ = (
        CheckConstraint("last_number >= 0", name="ck_enrollment_counters_last_number"),
    )

    course_type = Column(
        Enum(CourseType, name="course_type", values_callable=lambda x: [e.value for e in x]),
        primary_key=True,
    )
    year = Column(Integer, primary_key=True)
    last_number = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=get_utc_now, nullable=False)
    updated_at = Column(DateTime, default=get_utc_now, onupdate=get_utc_now, nullable=False)

    def __repr__(self) -> str:
        return f"<EnrollmentCounter {self.course_type}/{self.year} last={self.last_number}>"
