from collections import Counter
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Optional, Tuple
from app.core.database import AsyncSession
from app.core.auth import AuthUser
from app.core.logging import console_logger
from app.core.utils.enums import AnalyticsPeriodEnum, ApplicationStatusEnum
from app.repositories.job_application_repository import JobApplicationRepository
from app.schemas.analytics import AnalyticsResponse, AnalyticsSummary, RoleBreakdown, StatusBucket, TimePoint
from app.services.insight_service import generate_insights

PERIOD_DAYS = {
    AnalyticsPeriodEnum.LAST_30_DAYS: 30,
    AnalyticsPeriodEnum.LAST_90_DAYS: 90,
    AnalyticsPeriodEnum.ALL_TIME: None,
}

STATUS_COLORS = {
    ApplicationStatusEnum.SAVED: "#D1D5DB",
    ApplicationStatusEnum.APPLIED: "#A3A3CC",
    ApplicationStatusEnum.INTERVIEW: "#5C5C99",
    ApplicationStatusEnum.OFFER: "#10B981",
    ApplicationStatusEnum.REJECTED: "#F87171",
}

INTERVIEWED_STATUSES = (ApplicationStatusEnum.INTERVIEW, ApplicationStatusEnum.OFFER)
TOP_ROLES = 8


def period_start(period: AnalyticsPeriodEnum, today: Optional[date] = None) -> Optional[date]:
    days = PERIOD_DAYS[period]
    if days is None:
        return None
    return (today or date.today()) - timedelta(days=days)


def _round_half_up(value: float) -> int:
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _percent(part: int, whole: int) -> float:
    if whole <= 0:
        return 0.0
    return round(part / whole * 100, 1)


def build_summary(status_counts: Dict[ApplicationStatusEnum, int], dates: Iterable[Tuple[date, Optional[date]]]) -> AnalyticsSummary:
    total = sum(status_counts.values())
    interviewed = sum(status_counts.get(s, 0) for s in INTERVIEWED_STATUSES)
    offers = status_counts.get(ApplicationStatusEnum.OFFER, 0)

    response_days = [(responded - applied).days for applied, responded in dates if responded is not None]
    avg_response = _round_half_up(sum(response_days) / len(response_days)) if response_days else 0

    return AnalyticsSummary(
        total_applications=total,
        interview_rate=_percent(interviewed, total),
        offer_rate=_percent(offers, interviewed),
        avg_response_time=avg_response,
    )


def build_status_distribution(status_counts: Dict[ApplicationStatusEnum, int]) -> List[StatusBucket]:
    return [
        StatusBucket(name=status.value, value=status_counts[status], color=STATUS_COLORS[status])
        for status in ApplicationStatusEnum
        if status_counts.get(status, 0) > 0
    ]


def build_time_data(dates: Iterable[Tuple[date, Optional[date]]]) -> List[TimePoint]:
    per_day = Counter(applied for applied, _ in dates)
    return [TimePoint(date=day, count=count) for day, count in sorted(per_day.items())]


def build_role_data(
    position_status_counts: Iterable[Tuple[str, ApplicationStatusEnum, int]], limit: int = TOP_ROLES
) -> List[RoleBreakdown]:
    """Per position: every application counts as applied, Interview and Offer as interviewed, Offer as offered."""
    roles: Dict[str, RoleBreakdown] = {}
    for position, status, count in position_status_counts:
        role = roles.setdefault(position, RoleBreakdown(name=position))
        role.applied += count
        if status in INTERVIEWED_STATUSES:
            role.interview += count
        if status == ApplicationStatusEnum.OFFER:
            role.offered += count

    ranked = sorted(roles.values(), key=lambda r: (-r.applied, r.name))
    return ranked[:limit]


class AnalyticsService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.job_repo = JobApplicationRepository(db)

    async def get_analytics(self, user: AuthUser, period: AnalyticsPeriodEnum, today: Optional[date] = None) -> AnalyticsResponse:
        since = period_start(period, today)

        status_counts = await self.job_repo.count_by_status(user.id, since)
        dates = await self.job_repo.list_dates(user.id, since)
        position_status_counts = await self.job_repo.count_by_position_and_status(user.id, since)

        summary = build_summary(status_counts, dates)
        status_distribution = build_status_distribution(status_counts)

        console_logger.debug(
            "analytics.computed",
            user_id=user.id_str,
            period=period.value,
            total_applications=summary.total_applications,
        )

        return AnalyticsResponse(
            summary=summary,
            status_distribution=status_distribution,
            time_data=build_time_data(dates),
            role_data=build_role_data(position_status_counts),
            insights=generate_insights(summary, status_distribution),
        )
