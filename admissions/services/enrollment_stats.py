"""Enrollment Stats Service - read-only views over the counters"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from admissions.config import settings
from admissions.models.enrollment_counter import EnrollmentCounter
from admissions.models.enums import CourseType
from admissions.schemas.enrollment import (
    EnrollmentNumberCheck,
    EnrollmentStats,
    ParsedEnrollmentNumberOut,
)
from admissions.services.admission_validator import AdmissionValidator
from admissions.services.enrollment_number import EnrollmentNumberFormatter, InvalidEnrollmentNumber


class EnrollmentStatsService:
    """Counter usage and enrollment number availability"""

    @staticmethod
    def _stats_for(course_type: CourseType, year: int, last_number: int) -> EnrollmentStats:
        capacity = settings.ENROLLMENT_PARTITION_CAPACITY
        return EnrollmentStats(
            course_type=course_type,
            year=year,
            total_allocated=last_number,
            available_slots=max(0, capacity - last_number),
            last_enrollment_number=(
                EnrollmentNumberFormatter.format(year, course_type, last_number)
                if last_number > 0 else None
            ),
        )

    @staticmethod
    async def get_stats(db: AsyncSession, course_type: CourseType, year: int) -> EnrollmentStats:
        """Stats for one partition; a partition with no counter yet reports zero usage."""
        result = await db.execute(
            select(EnrollmentCounter.last_number).where(
                EnrollmentCounter.course_type == course_type,
                EnrollmentCounter.year == year,
            )
        )
        last_number: Optional[int] = result.scalar_one_or_none()
        return EnrollmentStatsService._stats_for(course_type, year, last_number or 0)

    @staticmethod
    async def get_all_stats(db: AsyncSession) -> List[EnrollmentStats]:
        """Stats for every partition that has allocated at least once, newest year first."""
        result = await db.execute(
            select(EnrollmentCounter).order_by(
                EnrollmentCounter.year.desc(), EnrollmentCounter.course_type.asc()
            )
        )
        return [
            EnrollmentStatsService._stats_for(c.course_type, c.year, c.last_number)
            for c in result.scalars().all()
        ]

    @staticmethod
    async def check_enrollment_number(db: AsyncSession, enrollment_number: str) -> EnrollmentNumberCheck:
        """Parse the number and report whether a student already holds it."""
        try:
            parsed = EnrollmentNumberFormatter.parse(enrollment_number)
        except InvalidEnrollmentNumber:
            return EnrollmentNumberCheck(
                enrollment_number=enrollment_number,
                is_valid=False,
                is_available=False,
            )

        existing = await AdmissionValidator.get_student_by_enrollment_number(db, enrollment_number)
        return EnrollmentNumberCheck(
            enrollment_number=enrollment_number,
            is_valid=True,
            is_available=existing is None,
            parsed=ParsedEnrollmentNumberOut(**parsed._asdict()),
        )
