"""Shared pytest fixtures for unit and integration tests."""

import os
import uuid
import pytest

# Settings are read at import time; point them at SQLite before importing the app
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test_admissions.db")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("LOG_FORMAT", "text")

from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from admissions.config import settings
from admissions.database import Base, get_db
from admissions.main import app
from admissions.models import Course, CourseType, Gender, Student

COURSE_DURATIONS = {
    CourseType.BCA: 3,
    CourseType.MCA: 2,
    CourseType.BBA: 3,
    CourseType.MBA: 2,
    CourseType.BCOM: 3,
    CourseType.MCOM: 2,
}


@pytest.fixture
async def engine(tmp_path):
    """File-backed SQLite so concurrent sessions get their own connections."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'admissions.db'}",
        poolclass=NullPool,
        connect_args={"timeout": 30},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def courses(session_factory) -> dict:
    """One course per course type, keyed by type."""
    async with session_factory() as session:
        created = {
            course_type: Course(
                type=course_type,
                name=f"{course_type.value} programme",
                duration_years=duration,
                is_active=True,
            )
            for course_type, duration in COURSE_DURATIONS.items()
        }
        session.add_all(created.values())
        await session.commit()
    return created


@pytest.fixture
def actor_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def unique_suffix() -> str:
    """Unique suffix for test data to avoid collisions."""
    return str(uuid.uuid4())[:8]


@pytest.fixture
def make_admission(courses):
    """Build an admission request payload for a course type."""
    def _make(course_type: CourseType = CourseType.BCA, admission_year: int = 2024, **overrides) -> dict:
        payload = {
            "name": "Asha Verma",
            "email": None,
            "phone": "+919876543210",
            "age": 19,
            "gender": Gender.FEMALE.value,
            "address": "12 College Road, Pune",
            "admission_year": admission_year,
            "passout_year": admission_year + COURSE_DURATIONS[course_type],
            "course_id": str(courses[course_type].id),
        }
        payload.update(overrides)
        return payload
    return _make


@pytest.fixture
async def inactive_student(session_factory, courses, actor_id) -> Student:
    """A deactivated student still holding email and number."""
    async with session_factory() as session:
        student = Student(
            enrollment_number="2023BCA001",
            name="Former Student",
            email="taken@college.example.com",
            phone="+919800000000",
            age=21,
            gender=Gender.MALE,
            address="Old Hostel",
            course_id=courses[CourseType.BCA].id,
            admission_year=2023,
            passout_year=2026,
            created_by=actor_id,
            is_active=False,
        )
        session.add(student)
        await session.commit()
    return student


@pytest.fixture
def api_base() -> str:
    return f"http://test{settings.API_V1_PREFIX}"


@pytest.fixture
async def async_client(session_factory, api_base: str):
    """Async HTTP client against the app, with sessions from the test database."""
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    client = AsyncClient(transport=transport, base_url=api_base, timeout=30.0)
    yield client
    await client.aclose()
    app.dependency_overrides.clear()


@pytest.fixture
def actor_headers(actor_id) -> dict:
    return {"X-Actor-ID": str(actor_id)}
