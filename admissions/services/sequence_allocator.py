"""Sequence Allocator - partitioned, atomic enrollment counters"""

import logging
from typing import NamedTuple, Optional

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from admissions.config import settings
from admissions.core.errors import DomainError, Result
from admissions.models.enrollment_counter import EnrollmentCounter
from admissions.models.enums import CourseType
from admissions.utils.time import get_utc_now

logger = logging.getLogger(__name__)

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class Partition(NamedTuple):
    """Scope of one counter: a course type within an admission year"""
    course_type: CourseType
    admission_year: int

    def __str__(self) -> str:
        return f"{self.course_type.value}/{self.admission_year}"


class SequenceAllocator:
    """Issues unique, increasing sequence numbers per partition"""

    @staticmethod
    async def allocate(
        db: AsyncSession,
        partition: Partition,
        capacity: Optional[int] = None,
    ) -> Result[int]:
        """
        Increment the partition's counter and return the new value.

        The increment is one upsert statement, so the database serializes
        concurrent callers on the same counter row while other partitions are
        untouched. The statement runs in the caller's transaction: the row
        stays locked, and the increment provisional, until the caller commits
        or rolls back.

        Returns:
            The allocated number, or a DomainError when the partition is full
            (CAPACITY_EXCEEDED) or the statement could not run (ALLOCATION_FAILURE).
        """
        if capacity is None:
            capacity = settings.ENROLLMENT_PARTITION_CAPACITY

        dialect = db.get_bind().dialect.name
        insert = _DIALECT_INSERTS.get(dialect)
        if insert is None:
            logger.error(
                "No atomic upsert for database dialect",
                extra={"partition": str(partition), "dialect": dialect},
            )
            return DomainError.allocation_failure(
                "ALLOCATION_FAILED",
                f"Enrollment numbers cannot be allocated on a {dialect} database",
                course_type=partition.course_type.value,
                admission_year=partition.admission_year,
                dialect=dialect,
            )

        now = get_utc_now()
        stmt = (
            insert(EnrollmentCounter)
            .values(
                course_type=partition.course_type,
                year=partition.admission_year,
                last_number=1,
                created_at=now,
                updated_at=now,
            )
            .on_conflict_do_update(
                index_elements=["course_type", "year"],
                set_={
                    "last_number": EnrollmentCounter.last_number + 1,
                    "updated_at": now,
                },
                # A full partition matches nothing: no row is returned and the counter stays put
                where=EnrollmentCounter.last_number < capacity,
            )
            .returning(EnrollmentCounter.last_number)
        )

        try:
            result = await db.execute(stmt)
            allocated = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(
                "Enrollment sequence allocation failed",
                extra={"partition": str(partition), "error": str(e)},
                exc_info=True,
            )
            return DomainError.allocation_failure(
                "ALLOCATION_FAILED",
                f"Could not allocate an enrollment number for {partition}",
                course_type=partition.course_type.value,
                admission_year=partition.admission_year,
            )

        if allocated is None:
            logger.warning(
                "Enrollment partition is full",
                extra={"partition": str(partition), "capacity": capacity},
            )
            return DomainError.capacity_exceeded(
                "ENROLLMENT_CAPACITY_EXCEEDED",
                f"Maximum enrollment limit ({capacity}) reached for "
                f"{partition.course_type.value} {partition.admission_year}",
                course_type=partition.course_type.value,
                admission_year=partition.admission_year,
                capacity=capacity,
            )

        logger.debug(
            "Allocated enrollment sequence",
            extra={"partition": str(partition), "sequence_number": allocated},
        )
        return allocated
