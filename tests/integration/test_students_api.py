"""Integration tests: admission and enrollment endpoints."""

import pytest
from uuid import uuid4
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health(async_client: AsyncClient):
    resp = await async_client.get("http://test/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_create_student(async_client: AsyncClient, actor_headers: dict, make_admission, actor_id):
    resp = await async_client.post(
        "/students",
        headers=actor_headers,
        json=make_admission(email="Meera@College.Example.com"),
    )

    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body["success"] is True
    data = body["data"]
    assert data["enrollment_number"] == "2024BCA001"
    assert data["email"] == "meera@college.example.com"
    assert data["created_by"] == str(actor_id)
    assert "X-Request-ID" in resp.headers


@pytest.mark.asyncio
async def test_create_student_requires_actor(async_client: AsyncClient, make_admission):
    resp = await async_client.post("/students", json=make_admission())
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_create_student_rejects_malformed_actor(async_client: AsyncClient, make_admission):
    resp = await async_client.post(
        "/students", headers={"X-Actor-ID": "admin"}, json=make_admission()
    )
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_create_student_unknown_course(async_client: AsyncClient, actor_headers: dict, make_admission):
    resp = await async_client.post(
        "/students",
        headers=actor_headers,
        json=make_admission(course_id=str(uuid4())),
    )
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "COURSE_NOT_FOUND"


@pytest.mark.asyncio
async def test_create_student_invalid_years(async_client: AsyncClient, actor_headers: dict, make_admission):
    resp = await async_client.post(
        "/students",
        headers=actor_headers,
        json=make_admission(passout_year=2026),
    )
    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert body["error"]["code"] == "INVALID_YEARS"
    assert "2027" in body["error"]["message"]


@pytest.mark.asyncio
async def test_create_student_duplicate_email(
    async_client: AsyncClient, actor_headers: dict, make_admission, inactive_student
):
    resp = await async_client.post(
        "/students",
        headers=actor_headers,
        json=make_admission(email=inactive_student.email),
    )
    assert resp.status_code == 409
    assert resp.json()["error"]["code"] == "DUPLICATE_EMAIL"


@pytest.mark.asyncio
async def test_create_student_reused_idempotency_key(
    async_client: AsyncClient, actor_headers: dict, make_admission
):
    resp = await async_client.post(
        "/students",
        headers=actor_headers,
        json=make_admission(idempotency_key="form-301"),
    )
    assert resp.status_code == 201, resp.text

    resp = await async_client.post(
        "/students",
        headers=actor_headers,
        json=make_admission(name="Kiran Rao", idempotency_key="form-301"),
    )
    assert resp.status_code == 409
    assert resp.json()["error"]["code"] == "IDEMPOTENCY_KEY_REUSED"


@pytest.mark.asyncio
async def test_create_student_rejects_malformed_email(
    async_client: AsyncClient, actor_headers: dict, make_admission
):
    resp = await async_client.post(
        "/students",
        headers=actor_headers,
        json=make_admission(email="foo@bar..com"),
    )
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_create_student_schema_validation(async_client: AsyncClient, actor_headers: dict, make_admission):
    resp = await async_client.post(
        "/students",
        headers=actor_headers,
        json=make_admission(age=12),
    )
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_enrollment_stats_and_validation(async_client: AsyncClient, actor_headers: dict, make_admission):
    resp = await async_client.post("/students", headers=actor_headers, json=make_admission())
    assert resp.status_code == 201, resp.text

    resp = await async_client.get("/enrollments/stats/BCA/2024", headers=actor_headers)
    assert resp.status_code == 200
    stats = resp.json()["data"]
    assert stats["total_allocated"] == 1
    assert stats["last_enrollment_number"] == "2024BCA001"

    resp = await async_client.get("/enrollments/stats", headers=actor_headers)
    assert resp.status_code == 200
    assert len(resp.json()["data"]) == 1

    resp = await async_client.get("/enrollments/validate/2024BCA001", headers=actor_headers)
    check = resp.json()["data"]
    assert check["is_valid"] is True
    assert check["is_available"] is False

    resp = await async_client.get("/enrollments/validate/2024BCA999", headers=actor_headers)
    assert resp.json()["data"]["is_available"] is True


@pytest.mark.asyncio
async def test_enrollment_stats_unknown_course_type(async_client: AsyncClient, actor_headers: dict):
    resp = await async_client.get("/enrollments/stats/BSC/2024", headers=actor_headers)
    assert resp.status_code == 422
