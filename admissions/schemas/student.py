import re
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from uuid import UUID
from datetime import datetime

from admissions.models.enums import Gender

PHONE_PATTERN = re.compile(r"[+]?[\d\s\-()]{10,15}", re.ASCII)


class StudentCreate(BaseModel):
    """Admission request. Year ranges and course consistency are checked by the admission workflow."""
    name: str = Field(..., min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone: str
    age: int = Field(..., ge=16, le=50)
    gender: Gender
    address: str = Field(..., min_length=1, max_length=500)
    admission_year: int
    passout_year: int
    course_id: UUID
    # Lets a client retry a timed-out admission without creating a second student
    idempotency_key: Optional[str] = Field(None, min_length=1, max_length=64)

    @field_validator("name", "address", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        if isinstance(v, str):
            v = v.strip().lower()
            return v or None
        return v

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v: str) -> str:
        if not PHONE_PATTERN.fullmatch(v):
            raise ValueError("Please provide a valid phone number")
        return v


class StudentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    enrollment_number: str
    name: str
    email: Optional[str] = None
    phone: str
    age: int
    gender: Gender
    address: str
    course_id: UUID
    admission_year: int
    passout_year: int
    is_active: bool
    created_by: UUID
    created_at: datetime
    updated_at: datetime
