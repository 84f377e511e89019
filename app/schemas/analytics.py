from pydantic import Field
from typing import List
import datetime
from app.schemas.common import CamelModel


class AnalyticsSummary(CamelModel):
    total_applications: int = 0
    interview_rate: float = Field(default=0.0, description="Percent of applications that reached an interview")
    offer_rate: float = Field(default=0.0, description="Percent of interviewed applications that got an offer")
    avg_response_time: float = Field(default=0.0, description="Mean days from applying to first response")


class StatusBucket(CamelModel):
    name: str
    value: int
    color: str = "#A3A3CC"


class TimePoint(CamelModel):
    date: datetime.date
    count: int


class RoleBreakdown(CamelModel):
    """Applications for one position split by how far they got"""
    name: str
    applied: int = 0
    interview: int = 0
    offered: int = 0


class Insight(CamelModel):
    title: str
    description: str


class AnalyticsResponse(CamelModel):
    summary: AnalyticsSummary
    status_distribution: List[StatusBucket] = []
    time_data: List[TimePoint] = []
    role_data: List[RoleBreakdown] = []
    insights: List[Insight] = []
