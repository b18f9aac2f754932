"""Domain error values returned by the admission pipeline.

Validation and allocation steps return a ``DomainError`` instead of raising,
so a caller tells success from failure with ``isinstance(result, DomainError)``
and every failure carries its kind, a stable code and a readable reason.
"""

import enum
from typing import Any, Dict, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field


T = TypeVar("T")


class ErrorKind(str, enum.Enum):
    """Failure categories of an admission request"""
    NOT_FOUND = "not_found"
    VALIDATION_ERROR = "validation_error"
    CONFLICT = "conflict"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    ALLOCATION_FAILURE = "allocation_failure"
    PERSISTENCE_FAILURE = "persistence_failure"


class DomainError(BaseModel):
    """A failed step: what went wrong and why"""
    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    code: str
    reason: str
    context: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def not_found(cls, code: str, reason: str, **context: Any) -> "DomainError":
        return cls(kind=ErrorKind.NOT_FOUND, code=code, reason=reason, context=context)

    @classmethod
    def validation(cls, code: str, reason: str, **context: Any) -> "DomainError":
        return cls(kind=ErrorKind.VALIDATION_ERROR, code=code, reason=reason, context=context)

    @classmethod
    def conflict(cls, code: str, reason: str, **context: Any) -> "DomainError":
        return cls(kind=ErrorKind.CONFLICT, code=code, reason=reason, context=context)

    @classmethod
    def capacity_exceeded(cls, code: str, reason: str, **context: Any) -> "DomainError":
        return cls(kind=ErrorKind.CAPACITY_EXCEEDED, code=code, reason=reason, context=context)

    @classmethod
    def allocation_failure(cls, code: str, reason: str, **context: Any) -> "DomainError":
        return cls(kind=ErrorKind.ALLOCATION_FAILURE, code=code, reason=reason, context=context)

    @classmethod
    def persistence_failure(cls, code: str, reason: str, **context: Any) -> "DomainError":
        return cls(kind=ErrorKind.PERSISTENCE_FAILURE, code=code, reason=reason, context=context)


# Either the step's value or the reason it failed
Result = Union[T, DomainError]
