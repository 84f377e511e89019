"""In-process API tests for job application tracking."""

from datetime import date

import pytest
from httpx import AsyncClient

from tests.conftest import SIGNUP_PAYLOAD

JOB = {
    "company": "Analytical Engines Ltd",
    "position": "Backend Engineer",
    "location": "London",
    "status": "Applied",
    "appliedDate": "2026-09-01",
}


async def other_user_headers(client: AsyncClient) -> dict:
    resp = await client.post(
        "/api/auth/signup",
        json={**SIGNUP_PAYLOAD, "name": "Charles", "email": "charles@example.com"},
    )
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.mark.asyncio
async def test_jobs_require_authentication(client: AsyncClient):
    assert (await client.get("/api/jobs")).status_code == 401
    assert (await client.post("/api/jobs", json=JOB)).status_code == 401


@pytest.mark.asyncio
async def test_create_and_fetch_job(client: AsyncClient, auth_headers):
    created = await client.post("/api/jobs", json=JOB, headers=auth_headers)

    assert created.status_code == 201
    job = created.json()
    assert job["company"] == "Analytical Engines Ltd"
    assert job["status"] == "Applied"
    assert job["appliedDate"] == "2026-09-01"
    assert job["responseDate"] is None

    fetched = await client.get(f"/api/jobs/{job['id']}", headers=auth_headers)
    assert fetched.status_code == 200
    assert fetched.json()["position"] == "Backend Engineer"


@pytest.mark.asyncio
async def test_applied_date_defaults_to_today(client: AsyncClient, auth_headers):
    resp = await client.post(
        "/api/jobs", json={"company": "Acme", "position": "Engineer"}, headers=auth_headers
    )
    assert resp.status_code == 201
    assert resp.json()["appliedDate"] == date.today().isoformat()
    assert resp.json()["status"] == "Applied"


@pytest.mark.asyncio
async def test_list_is_newest_first_and_filterable(client: AsyncClient, auth_headers):
    await client.post("/api/jobs", json={**JOB, "appliedDate": "2026-08-01"}, headers=auth_headers)
    await client.post(
        "/api/jobs", json={**JOB, "appliedDate": "2026-09-15", "status": "Interview"}, headers=auth_headers
    )

    all_jobs = (await client.get("/api/jobs", headers=auth_headers)).json()
    assert [j["appliedDate"] for j in all_jobs] == ["2026-09-15", "2026-08-01"]

    interviews = (await client.get("/api/jobs", params={"status": "Interview"}, headers=auth_headers)).json()
    assert len(interviews) == 1
    assert interviews[0]["status"] == "Interview"


@pytest.mark.asyncio
async def test_update_job(client: AsyncClient, auth_headers):
    job = (await client.post("/api/jobs", json=JOB, headers=auth_headers)).json()

    resp = await client.patch(
        f"/api/jobs/{job['id']}",
        json={"status": "Interview", "responseDate": "2026-09-10"},
        headers=auth_headers,
    )

    assert resp.status_code == 200
    assert resp.json()["status"] == "Interview"
    assert resp.json()["responseDate"] == "2026-09-10"
    assert resp.json()["company"] == JOB["company"]


@pytest.mark.asyncio
async def test_response_before_applied_is_rejected(client: AsyncClient, auth_headers):
    resp = await client.post("/api/jobs", json={**JOB, "responseDate": "2026-08-01"}, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json()["error_code"] == "VALIDATION_ERROR"

    job = (await client.post("/api/jobs", json=JOB, headers=auth_headers)).json()
    resp = await client.patch(f"/api/jobs/{job['id']}", json={"responseDate": "2026-08-01"}, headers=auth_headers)
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_null_for_required_field_is_rejected(client: AsyncClient, auth_headers):
    job = (await client.post("/api/jobs", json=JOB, headers=auth_headers)).json()
    resp = await client.patch(f"/api/jobs/{job['id']}", json={"company": None}, headers=auth_headers)
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_delete_job(client: AsyncClient, auth_headers):
    job = (await client.post("/api/jobs", json=JOB, headers=auth_headers)).json()

    assert (await client.delete(f"/api/jobs/{job['id']}", headers=auth_headers)).status_code == 204
    assert (await client.get(f"/api/jobs/{job['id']}", headers=auth_headers)).status_code == 404
    assert (await client.delete(f"/api/jobs/{job['id']}", headers=auth_headers)).status_code == 404


@pytest.mark.asyncio
async def test_jobs_are_scoped_to_their_owner(client: AsyncClient, auth_headers):
    job = (await client.post("/api/jobs", json=JOB, headers=auth_headers)).json()
    intruder = await other_user_headers(client)

    assert (await client.get(f"/api/jobs/{job['id']}", headers=intruder)).status_code == 404
    assert (await client.patch(f"/api/jobs/{job['id']}", json={"status": "Offer"}, headers=intruder)).status_code == 404
    assert (await client.delete(f"/api/jobs/{job['id']}", headers=intruder)).status_code == 404
    assert (await client.get("/api/jobs", headers=intruder)).json() == []

    still_there = await client.get(f"/api/jobs/{job['id']}", headers=auth_headers)
    assert still_there.json()["status"] == "Applied"
