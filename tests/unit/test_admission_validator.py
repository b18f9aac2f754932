"""Unit tests for AdmissionValidator."""

import pytest
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4
from sqlalchemy.ext.asyncio import AsyncSession

from admissions.core.errors import DomainError, ErrorKind
from admissions.models.course import Course
from admissions.models.enums import CourseType
from admissions.services.admission_validator import AdmissionValidator


def _course(course_type=CourseType.BCA, duration=3) -> Course:
    return Course(id=uuid4(), type=course_type, name="Course", duration_years=duration, is_active=True)


# ---------------------------------------------------------------------------
# validate_years
# ---------------------------------------------------------------------------

def test_validate_years_consistent():
    assert AdmissionValidator.validate_years(2024, 2027, _course(), current=2026) is None


def test_validate_years_passout_must_match_duration():
    error = AdmissionValidator.validate_years(2024, 2026, _course(), current=2026)
    assert isinstance(error, DomainError)
    assert error.kind == ErrorKind.VALIDATION_ERROR
    assert error.code == "INVALID_YEARS"
    assert "2027" in error.reason


def test_validate_years_longer_than_duration_rejected():
    error = AdmissionValidator.validate_years(2024, 2028, _course(), current=2026)
    assert error is not None
    assert error.kind == ErrorKind.VALIDATION_ERROR


def test_validate_years_two_year_course():
    mca = _course(CourseType.MCA, 2)
    assert AdmissionValidator.validate_years(2025, 2027, mca, current=2026) is None
    assert AdmissionValidator.validate_years(2025, 2028, mca, current=2026) is not None


def test_validate_years_admission_before_2020():
    error = AdmissionValidator.validate_years(2019, 2022, _course(), current=2026)
    assert error is not None
    assert "2020" in error.reason


def test_validate_years_admission_next_year_allowed():
    assert AdmissionValidator.validate_years(2027, 2030, _course(), current=2026) is None


def test_validate_years_admission_too_far_ahead():
    error = AdmissionValidator.validate_years(2028, 2031, _course(), current=2026)
    assert error is not None
    assert "future" in error.reason


def test_validate_years_passout_range():
    one_year = _course(CourseType.MBA, 1)
    error = AdmissionValidator.validate_years(2020, 2020, one_year, current=2026)
    assert error is not None
    assert "2021" in error.reason


def test_validate_years_passout_too_far_ahead():
    decade_course = _course(CourseType.BBA, 10)
    error = AdmissionValidator.validate_years(2021, 2031, decade_course, current=2020)
    assert error is not None
    assert "10 years" in error.reason


def test_validate_years_error_context():
    error = AdmissionValidator.validate_years(2024, 2026, _course(), current=2026)
    assert error.context == {"admission_year": 2024, "passout_year": 2026}


def test_expected_passout_year():
    assert AdmissionValidator.expected_passout_year(2024, _course()) == 2027


# ---------------------------------------------------------------------------
# resolve_course / check_email_available (mocked session)
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_resolve_course_found():
    db = AsyncMock(spec=AsyncSession)
    course = _course()
    mock_result = MagicMock()
    mock_result.scalar_one_or_none.return_value = course
    db.execute.return_value = mock_result

    result = await AdmissionValidator.resolve_course(db, course.id)

    assert result is course


@pytest.mark.asyncio
async def test_resolve_course_missing():
    db = AsyncMock(spec=AsyncSession)
    mock_result = MagicMock()
    mock_result.scalar_one_or_none.return_value = None
    db.execute.return_value = mock_result
    course_id = uuid4()

    result = await AdmissionValidator.resolve_course(db, course_id)

    assert isinstance(result, DomainError)
    assert result.kind == ErrorKind.NOT_FOUND
    assert result.code == "COURSE_NOT_FOUND"
    assert str(course_id) in result.reason


@pytest.mark.asyncio
async def test_check_email_available_free():
    db = AsyncMock(spec=AsyncSession)
    mock_result = MagicMock()
    mock_result.first.return_value = None
    db.execute.return_value = mock_result

    assert await AdmissionValidator.check_email_available(db, "new@college.example.com") is None
    assert db.execute.called


@pytest.mark.asyncio
async def test_check_email_available_taken():
    db = AsyncMock(spec=AsyncSession)
    mock_result = MagicMock()
    mock_result.first.return_value = (uuid4(),)
    db.execute.return_value = mock_result

    error = await AdmissionValidator.check_email_available(db, "taken@college.example.com")

    assert error.kind == ErrorKind.CONFLICT
    assert error.code == "DUPLICATE_EMAIL"


@pytest.mark.asyncio
async def test_check_email_skipped_without_email():
    db = AsyncMock(spec=AsyncSession)

    assert await AdmissionValidator.check_email_available(db, None) is None
    assert await AdmissionValidator.check_email_available(db, "") is None
    assert not db.execute.called


def test_validate_format():
    assert AdmissionValidator.validate_format("2024BCA001")
    assert not AdmissionValidator.validate_format("2024XYZ001")
