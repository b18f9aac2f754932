"""Translate domain errors into HTTP responses"""

from fastapi import status
from fastapi.responses import JSONResponse

from admissions.core.errors import DomainError, ErrorKind
from admissions.schemas.responses import ErrorDetail, ErrorResponse

STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.CAPACITY_EXCEEDED: status.HTTP_409_CONFLICT,
    ErrorKind.ALLOCATION_FAILURE: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorKind.PERSISTENCE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(error: DomainError) -> JSONResponse:
    body = ErrorResponse(error=ErrorDetail(code=error.code, message=error.reason))
    return JSONResponse(status_code=STATUS_BY_KIND[error.kind], content=body.model_dump())
