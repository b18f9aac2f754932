"""Admission Workflow - validated, numbered student creation"""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from admissions.core.errors import DomainError, Result
from admissions.models.student import Student
from admissions.schemas.student import StudentCreate
from admissions.services.admission_validator import AdmissionValidator
from admissions.services.enrollment_number import EnrollmentCapacityError, EnrollmentNumberFormatter
from admissions.services.sequence_allocator import Partition, SequenceAllocator

logger = logging.getLogger(__name__)

# Fields a retried request must repeat for its idempotency key to be honoured
REPLAY_FIELDS = ("course_id", "admission_year", "passout_year", "email", "name")


class AdmissionWorkflow:
    """Turns an admission request into a persisted student with an enrollment number"""

    @staticmethod
    async def create_student_admission(
        db: AsyncSession,
        admission: StudentCreate,
        created_by: UUID,
    ) -> Result[Student]:
        """
        Admit a student.

        Steps, each of which may end the request with a DomainError:
        course lookup, year validation, idempotency replay, email availability,
        sequence allocation, formatting, insert.

        Allocation and insert share one transaction that this method commits.
        If the insert fails the counter increment is rolled back with it, so a
        failed admission does not burn a number. Nothing is retried here.

        Args:
            db: Database session with no pending writes
            admission: Validated admission request
            created_by: Actor creating the record

        Returns:
            The persisted Student, or the DomainError that stopped the workflow
        """
        course = await AdmissionValidator.resolve_course(db, admission.course_id)
        if isinstance(course, DomainError):
            return course

        error = AdmissionValidator.validate_years(
            admission.admission_year, admission.passout_year, course
        )
        if error is not None:
            return error

        if admission.idempotency_key:
            existing = await AdmissionValidator.get_student_by_idempotency_key(
                db, admission.idempotency_key
            )
            if existing is not None:
                return AdmissionWorkflow._replay(existing, admission)

        error = await AdmissionValidator.check_email_available(db, admission.email)
        if error is not None:
            return error

        partition = Partition(course.type, admission.admission_year)
        sequence_number = await SequenceAllocator.allocate(db, partition)
        if isinstance(sequence_number, DomainError):
            await db.rollback()
            return sequence_number

        try:
            enrollment_number = EnrollmentNumberFormatter.format(
                admission.admission_year, course.type, sequence_number
            )
        except EnrollmentCapacityError as e:
            await db.rollback()
            return DomainError.capacity_exceeded(
                "ENROLLMENT_CAPACITY_EXCEEDED",
                str(e),
                course_type=course.type.value,
                admission_year=admission.admission_year,
            )

        student = Student(
            **admission.model_dump(),
            enrollment_number=enrollment_number,
            created_by=created_by,
            is_active=True,
        )

        try:
            db.add(student)
            await db.flush()
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            AdmissionWorkflow._log_released_number(partition, sequence_number, enrollment_number, e)
            return await AdmissionWorkflow._classify_conflict(db, admission, enrollment_number)
        except SQLAlchemyError as e:
            await db.rollback()
            AdmissionWorkflow._log_released_number(partition, sequence_number, enrollment_number, e)
            return DomainError.persistence_failure(
                "PERSISTENCE_FAILED",
                f"Student record for {enrollment_number} could not be saved",
                course_type=partition.course_type.value,
                admission_year=partition.admission_year,
                sequence_number=sequence_number,
                enrollment_number=enrollment_number,
            )

        await db.refresh(student)
        logger.info(
            f"Created student {student.enrollment_number}",
            extra={
                "student_id": str(student.id),
                "enrollment_number": student.enrollment_number,
                "course_type": partition.course_type.value,
                "admission_year": partition.admission_year,
                "created_by": str(created_by),
            },
        )
        return student

    @staticmethod
    def _log_released_number(
        partition: Partition,
        sequence_number: int,
        enrollment_number: str,
        exc: Exception,
    ) -> None:
        """Record an allocation undone by a failed insert, for counter reconciliation."""
        logger.error(
            "Student insert failed after enrollment number allocation",
            extra={
                "event": "enrollment_number_released",
                "course_type": partition.course_type.value,
                "admission_year": partition.admission_year,
                "sequence_number": sequence_number,
                "enrollment_number": enrollment_number,
                "error": str(exc),
            },
        )

    @staticmethod
    def _replay(existing: Student, admission: StudentCreate) -> Result[Student]:
        """
        Answer a request whose idempotency key already produced a student.

        The first attempt's student is returned only when the request repeats
        it; a key reused for a different admission is a conflict.
        """
        mismatched = [
            field for field in REPLAY_FIELDS
            if getattr(existing, field) != getattr(admission, field)
        ]
        if mismatched:
            logger.warning(
                "Idempotency key reused for a different admission",
                extra={
                    "idempotency_key": admission.idempotency_key,
                    "enrollment_number": existing.enrollment_number,
                    "mismatched_fields": mismatched,
                },
            )
            return DomainError.conflict(
                "IDEMPOTENCY_KEY_REUSED",
                f"Idempotency key '{admission.idempotency_key}' was already used "
                f"for a different admission",
                idempotency_key=admission.idempotency_key,
                mismatched_fields=mismatched,
            )

        logger.info(
            "Admission replayed",
            extra={
                "idempotency_key": admission.idempotency_key,
                "enrollment_number": existing.enrollment_number,
            },
        )
        return existing

    @staticmethod
    async def _classify_conflict(
        db: AsyncSession, admission: StudentCreate, enrollment_number: str
    ) -> Result[Student]:
        """Work out which unique constraint a concurrent admission beat us to."""
        # A concurrent retry of the same request also holds the email, so the key wins
        if admission.idempotency_key:
            existing = await AdmissionValidator.get_student_by_idempotency_key(
                db, admission.idempotency_key
            )
            if existing is not None:
                return AdmissionWorkflow._replay(existing, admission)
        error = await AdmissionValidator.check_email_available(db, admission.email)
        if error is not None:
            return error
        return DomainError.conflict(
            "DUPLICATE_ENROLLMENT",
            f"Student with enrollment number '{enrollment_number}' already exists",
            enrollment_number=enrollment_number,
        )
