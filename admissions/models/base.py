"""Base Models and Mixins"""

import uuid
from sqlalchemy import Column, DateTime, Boolean, Uuid

from admissions.database import Base
from admissions.utils.time import get_utc_now


class BaseModel(Base):
    """
    Base model class with common fields for all models.

    Provides:
    - UUID primary key
    - created_at timestamp
    - updated_at timestamp
    """
    __abstract__ = True

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    created_at = Column(DateTime, default=get_utc_now, nullable=False)
    updated_at = Column(DateTime, default=get_utc_now, onupdate=get_utc_now, nullable=False)


class StatusMixin:
    """
    Mixin for models with active/inactive status.

    Records carrying this flag are deactivated, never removed.
    """
    is_active = Column(Boolean, default=True, nullable=False, index=True)

    def deactivate(self) -> None:
        """Soft delete: keep the row, mark it inactive"""
        self.is_active = False

    def activate(self) -> None:
        self.is_active = True
