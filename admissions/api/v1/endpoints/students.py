from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from admissions.api import deps
from admissions.api.errors import error_response
from admissions.core.errors import DomainError
from admissions.schemas.responses import ErrorResponse, SuccessResponse
from admissions.schemas.student import StudentCreate, StudentResponse
from admissions.services.admission_workflow import AdmissionWorkflow

router = APIRouter()


@router.post(
    "",
    response_model=SuccessResponse[StudentResponse],
    status_code=201,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def create_student(
    student_in: StudentCreate,
    actor_id: UUID = Depends(deps.get_current_actor),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    Admit a student and assign the next enrollment number for the course and admission year.
    """
    result = await AdmissionWorkflow.create_student_admission(db, student_in, created_by=actor_id)
    if isinstance(result, DomainError):
        return error_response(result)

    return SuccessResponse(
        data=StudentResponse.model_validate(result),
        message="Student created successfully",
    )
