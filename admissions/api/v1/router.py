"""API V1 Router"""

from fastapi import APIRouter

from admissions.api.v1.endpoints import students, enrollments

api_router = APIRouter()

api_router.include_router(students.router, prefix="/students", tags=["Student Admission"])
api_router.include_router(enrollments.router, prefix="/enrollments", tags=["Enrollment Numbers"])
