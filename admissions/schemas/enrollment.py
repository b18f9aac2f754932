"""Enrollment counter and number lookup schemas"""

from typing import Optional
from pydantic import BaseModel

from admissions.models.enums import CourseType


class EnrollmentStats(BaseModel):
    """Usage of one (course type, year) partition"""
    course_type: CourseType
    year: int
    total_allocated: int
    available_slots: int
    last_enrollment_number: Optional[str] = None


class ParsedEnrollmentNumberOut(BaseModel):
    year: int
    course_type: CourseType
    sequence_number: int


class EnrollmentNumberCheck(BaseModel):
    """Whether a number is well formed and still unassigned"""
    enrollment_number: str
    is_valid: bool
    is_available: bool
    parsed: Optional[ParsedEnrollmentNumberOut] = None
