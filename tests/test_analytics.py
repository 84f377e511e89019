"""Analytics aggregation: pure builders plus the /jobs/analytics endpoint."""

from datetime import date, timedelta

import pytest
from httpx import AsyncClient

from app.core.utils.enums import AnalyticsPeriodEnum, ApplicationStatusEnum as Status
from app.services.analytics_service import (
    build_role_data,
    build_status_distribution,
    build_summary,
    build_time_data,
    period_start,
)


class TestBuilders:
    def test_summary_rates(self):
        counts = {Status.APPLIED: 6, Status.INTERVIEW: 3, Status.OFFER: 1}
        dates = [(date(2026, 1, 1), date(2026, 1, 11)), (date(2026, 1, 2), None), (date(2026, 1, 3), date(2026, 1, 7))]

        summary = build_summary(counts, dates)

        assert summary.total_applications == 10
        assert summary.interview_rate == 40.0
        assert summary.offer_rate == 25.0
        assert summary.avg_response_time == 7

    def test_summary_without_data(self):
        summary = build_summary({}, [])
        assert summary.total_applications == 0
        assert summary.interview_rate == 0.0
        assert summary.offer_rate == 0.0
        assert summary.avg_response_time == 0

    def test_rates_round_to_one_decimal(self):
        summary = build_summary({Status.APPLIED: 2, Status.INTERVIEW: 1}, [])
        assert summary.interview_rate == 33.3

    def test_status_distribution_keeps_enum_order_and_drops_empty(self):
        buckets = build_status_distribution({Status.REJECTED: 2, Status.APPLIED: 5, Status.SAVED: 0})
        assert [(b.name, b.value) for b in buckets] == [("Applied", 5), ("Rejected", 2)]
        assert all(b.color.startswith("#") for b in buckets)

    def test_time_data_counts_per_day_ascending(self):
        points = build_time_data([(date(2026, 3, 2), None), (date(2026, 3, 1), None), (date(2026, 3, 2), None)])
        assert [(p.date, p.count) for p in points] == [(date(2026, 3, 1), 1), (date(2026, 3, 2), 2)]

    def test_role_data_sorted_and_limited(self):
        roles = build_role_data(
            [
                ("Designer", Status.APPLIED, 1),
                ("Engineer", Status.APPLIED, 2),
                ("Engineer", Status.INTERVIEW, 1),
                ("Engineer", Status.OFFER, 1),
                ("Analyst", Status.REJECTED, 3),
                ("Analyst", Status.OFFER, 1),
                ("PM", Status.SAVED, 2),
            ],
            limit=3,
        )
        assert [(r.name, r.applied, r.interview, r.offered) for r in roles] == [
            ("Analyst", 4, 1, 1),
            ("Engineer", 4, 2, 1),
            ("PM", 2, 0, 0),
        ]

    def test_avg_response_time_rounds_half_up(self):
        dates = [(date(2026, 1, 1), date(2026, 1, 15)), (date(2026, 1, 1), date(2026, 1, 16))]
        assert build_summary({Status.INTERVIEW: 2}, dates).avg_response_time == 15

        dates = [(date(2026, 1, 1), date(2026, 1, 16)), (date(2026, 1, 1), date(2026, 1, 17))]
        assert build_summary({Status.INTERVIEW: 2}, dates).avg_response_time == 16

    def test_period_start(self):
        today = date(2026, 10, 18)
        assert period_start(AnalyticsPeriodEnum.LAST_30_DAYS, today) == date(2026, 9, 18)
        assert period_start(AnalyticsPeriodEnum.LAST_90_DAYS, today) == date(2026, 7, 20)
        assert period_start(AnalyticsPeriodEnum.ALL_TIME, today) is None


def days_ago(n: int) -> str:
    return (date.today() - timedelta(days=n)).isoformat()


@pytest.fixture
def applications():
    return [
        {"company": "A", "position": "Backend Engineer", "status": "Applied", "appliedDate": days_ago(5)},
        {"company": "B", "position": "Backend Engineer", "status": "Interview",
         "appliedDate": days_ago(10), "responseDate": days_ago(2)},
        {"company": "C", "position": "Data Engineer", "status": "Offer",
         "appliedDate": days_ago(20), "responseDate": days_ago(0)},
        {"company": "D", "position": "Data Engineer", "status": "Rejected",
         "appliedDate": days_ago(60), "responseDate": days_ago(40)},
        {"company": "E", "position": "Backend Engineer", "status": "Applied", "appliedDate": days_ago(200)},
    ]


async def seed(client: AsyncClient, headers: dict, applications: list) -> None:
    for payload in applications:
        resp = await client.post("/api/jobs", json=payload, headers=headers)
        assert resp.status_code == 201


@pytest.mark.asyncio
async def test_analytics_requires_authentication(client: AsyncClient):
    assert (await client.get("/api/jobs/analytics")).status_code == 401


@pytest.mark.asyncio
async def test_analytics_default_period_is_last_30_days(client: AsyncClient, auth_headers, applications):
    await seed(client, auth_headers, applications)

    resp = await client.get("/api/jobs/analytics", headers=auth_headers)

    assert resp.status_code == 200
    data = resp.json()
    assert data["summary"] == {
        "totalApplications": 3,
        "interviewRate": 66.7,
        "offerRate": 50.0,
        "avgResponseTime": 14,
    }
    assert [(b["name"], b["value"]) for b in data["statusDistribution"]] == [
        ("Applied", 1), ("Interview", 1), ("Offer", 1),
    ]
    assert [p["date"] for p in data["timeData"]] == [days_ago(20), days_ago(10), days_ago(5)]
    assert data["roleData"] == [
        {"name": "Backend Engineer", "applied": 2, "interview": 1, "offered": 0},
        {"name": "Data Engineer", "applied": 1, "interview": 1, "offered": 1},
    ]
    assert [i["title"] for i in data["insights"]] == [
        "Strong interview conversion rate",
        "Excellent offer conversion rate",
        "High interview conversion",
    ]


@pytest.mark.asyncio
async def test_analytics_wider_periods(client: AsyncClient, auth_headers, applications):
    await seed(client, auth_headers, applications)

    quarter = (await client.get("/api/jobs/analytics", params={"period": "last90days"}, headers=auth_headers)).json()
    assert quarter["summary"]["totalApplications"] == 4
    assert quarter["summary"]["interviewRate"] == 50.0
    assert quarter["summary"]["avgResponseTime"] == 16
    assert "Long response times" in [i["title"] for i in quarter["insights"]]

    everything = (await client.get("/api/jobs/analytics", params={"period": "alltime"}, headers=auth_headers)).json()
    assert everything["summary"]["totalApplications"] == 5
    assert everything["summary"]["interviewRate"] == 40.0
    assert everything["roleData"][0] == {"name": "Backend Engineer", "applied": 3, "interview": 1, "offered": 0}


@pytest.mark.asyncio
async def test_analytics_with_no_applications(client: AsyncClient, auth_headers):
    data = (await client.get("/api/jobs/analytics", headers=auth_headers)).json()

    assert data["summary"]["totalApplications"] == 0
    assert data["statusDistribution"] == []
    assert data["timeData"] == []
    assert data["roleData"] == []
    assert [i["title"] for i in data["insights"]] == [
        "Consider improving application targeting",
        "Interview preparation opportunity",
    ]


@pytest.mark.asyncio
async def test_analytics_rejects_unknown_period(client: AsyncClient, auth_headers):
    resp = await client.get("/api/jobs/analytics", params={"period": "lastweek"}, headers=auth_headers)
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_analytics_only_counts_own_applications(client: AsyncClient, auth_headers, applications):
    await seed(client, auth_headers, applications)
    other = await client.post(
        "/api/auth/signup",
        json={"name": "Charles", "email": "charles@example.com", "password": "difference-engine",
              "securityQuestion": "Q?", "securityAnswer": "A"},
    )
    headers = {"Authorization": f"Bearer {other.json()['token']}"}

    data = (await client.get("/api/jobs/analytics", params={"period": "alltime"}, headers=headers)).json()
    assert data["summary"]["totalApplications"] == 0
