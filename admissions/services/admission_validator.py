"""Admission Validator - course, year and uniqueness checks"""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from admissions.config import settings
from admissions.core.errors import DomainError, Result
from admissions.models.course import Course
from admissions.models.student import Student
from admissions.services.enrollment_number import EnrollmentNumberFormatter
from admissions.utils.time import current_year

logger = logging.getLogger(__name__)


class AdmissionValidator:
    """Checks run before an enrollment number is allocated"""

    @staticmethod
    async def resolve_course(db: AsyncSession, course_id: UUID) -> Result[Course]:
        """
        Get course by ID.

        Args:
            db: Database session
            course_id: Course ID

        Returns:
            Course, or a NOT_FOUND DomainError
        """
        result = await db.execute(select(Course).where(Course.id == course_id))
        course = result.scalar_one_or_none()
        if course is None:
            return DomainError.not_found(
                "COURSE_NOT_FOUND",
                f"Course with identifier '{course_id}' not found",
                course_id=str(course_id),
            )
        return course

    @staticmethod
    def expected_passout_year(admission_year: int, course: Course) -> int:
        return admission_year + course.duration_years

    @staticmethod
    def validate_years(
        admission_year: int,
        passout_year: int,
        course: Course,
        current: Optional[int] = None,
    ) -> Optional[DomainError]:
        """
        Check both years against their allowed ranges and the course duration.

        The passout year must be exactly admission_year + course.duration_years.

        Args:
            current: Reference calendar year; defaults to the current UTC year

        Returns:
            None when the years are consistent, otherwise a VALIDATION_ERROR
        """
        if current is None:
            current = current_year()

        def invalid(reason: str) -> DomainError:
            return DomainError.validation(
                "INVALID_YEARS",
                reason,
                admission_year=admission_year,
                passout_year=passout_year,
            )

        if admission_year < settings.MIN_ADMISSION_YEAR:
            return invalid(f"Admission year cannot be before {settings.MIN_ADMISSION_YEAR}")
        if admission_year > current + 1:
            return invalid("Admission year cannot be more than one year in the future")
        if passout_year < settings.MIN_PASSOUT_YEAR:
            return invalid(f"Passout year cannot be before {settings.MIN_PASSOUT_YEAR}")
        if passout_year > current + 10:
            return invalid("Passout year cannot be more than 10 years in the future")

        expected = AdmissionValidator.expected_passout_year(admission_year, course)
        if passout_year != expected:
            return invalid(
                f"Passout year should be {expected} for {course.type.value} "
                f"course starting in {admission_year}"
            )
        return None

    @staticmethod
    async def get_student_by_enrollment_number(
        db: AsyncSession, enrollment_number: str
    ) -> Optional[Student]:
        result = await db.execute(
            select(Student).where(Student.enrollment_number == enrollment_number)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def get_student_by_idempotency_key(db: AsyncSession, key: str) -> Optional[Student]:
        result = await db.execute(select(Student).where(Student.idempotency_key == key))
        return result.scalar_one_or_none()

    @staticmethod
    async def check_email_available(db: AsyncSession, email: Optional[str]) -> Optional[DomainError]:
        """Fail when any student, active or deactivated, already holds the email."""
        if not email:
            return None
        result = await db.execute(select(Student.id).where(Student.email == email))
        if result.first() is not None:
            return DomainError.conflict(
                "DUPLICATE_EMAIL",
                f"Student with email '{email}' already exists",
                email=email,
            )
        return None

    @staticmethod
    def validate_format(enrollment_number: str) -> bool:
        return EnrollmentNumberFormatter.is_valid(enrollment_number)
