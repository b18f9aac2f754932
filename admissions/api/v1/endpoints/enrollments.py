from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from admissions.api import deps
from admissions.models.enums import CourseType
from admissions.schemas.enrollment import EnrollmentNumberCheck, EnrollmentStats
from admissions.schemas.responses import SuccessResponse
from admissions.services.enrollment_stats import EnrollmentStatsService

router = APIRouter()


@router.get("/stats", response_model=SuccessResponse[list[EnrollmentStats]])
async def list_enrollment_stats(
    actor_id: UUID = Depends(deps.get_current_actor),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    Counter usage for every course and admission year.
    """
    stats = await EnrollmentStatsService.get_all_stats(db)
    return SuccessResponse(data=stats, message="Enrollment statistics retrieved successfully")


@router.get("/stats/{course_type}/{year}", response_model=SuccessResponse[EnrollmentStats])
async def get_enrollment_stats(
    course_type: CourseType,
    year: int = Path(..., ge=1000, le=9999),
    actor_id: UUID = Depends(deps.get_current_actor),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    stats = await EnrollmentStatsService.get_stats(db, course_type, year)
    return SuccessResponse(data=stats, message="Enrollment statistics retrieved successfully")


@router.get("/validate/{enrollment_number}", response_model=SuccessResponse[EnrollmentNumberCheck])
async def validate_enrollment_number(
    enrollment_number: str,
    actor_id: UUID = Depends(deps.get_current_actor),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    Check an enrollment number's format and whether it is already assigned.
    """
    check = await EnrollmentStatsService.check_enrollment_number(db, enrollment_number)
    return SuccessResponse(data=check)
