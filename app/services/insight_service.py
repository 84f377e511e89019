"""
Threshold rules that turn an analytics summary into short text insights.

The rules are evaluated in a fixed order and each contributes at most one
insight. All comparisons are strict, so a metric sitting exactly on a
threshold produces nothing.
"""

from typing import Iterable, List, Mapping, Union
from app.schemas.analytics import AnalyticsSummary, Insight, StatusBucket

HIGH_INTERVIEW_RATE = 30
LOW_INTERVIEW_RATE = 15
HIGH_OFFER_RATE = 20
LOW_OFFER_RATE = 5
SLOW_RESPONSE_DAYS = 14
HIGH_INTERVIEW_RATIO = 0.4

STRONG_INTERVIEW_RATE = Insight(
    title="Strong interview conversion rate",
    description="Your application-to-interview rate is above average. Keep up the good work!",
)
IMPROVE_TARGETING = Insight(
    title="Consider improving application targeting",
    description="Your interview rate is below average. Consider focusing on roles that better match your skills.",
)
EXCELLENT_OFFER_RATE = Insight(
    title="Excellent offer conversion rate",
    description="You're converting interviews to offers at a high rate. Your interview skills are strong!",
)
INTERVIEW_PREPARATION = Insight(
    title="Interview preparation opportunity",
    description="Consider practicing common interview questions and improving your interview skills.",
)
LONG_RESPONSE_TIMES = Insight(
    title="Long response times",
    description="Companies are taking longer to respond. Consider following up after 1-2 weeks.",
)
HIGH_INTERVIEW_CONVERSION = Insight(
    title="High interview conversion",
    description="You're getting interviews for a large portion of your applications. Your resume is working well!",
)

BucketLike = Union[StatusBucket, Mapping]


def _bucket_value(buckets: Iterable[BucketLike], name: str) -> int:
    for bucket in buckets:
        bucket_name = bucket["name"] if isinstance(bucket, Mapping) else bucket.name
        if bucket_name == name:
            value = bucket["value"] if isinstance(bucket, Mapping) else bucket.value
            return value or 0
    return 0


def generate_insights(summary: AnalyticsSummary, status_distribution: Iterable[BucketLike]) -> List[Insight]:
    insights: List[Insight] = []
    buckets = list(status_distribution)

    interview_rate = float(summary.interview_rate)
    if interview_rate > HIGH_INTERVIEW_RATE:
        insights.append(STRONG_INTERVIEW_RATE)
    elif interview_rate < LOW_INTERVIEW_RATE:
        insights.append(IMPROVE_TARGETING)

    offer_rate = float(summary.offer_rate)
    if offer_rate > HIGH_OFFER_RATE:
        insights.append(EXCELLENT_OFFER_RATE)
    elif offer_rate < LOW_OFFER_RATE:
        insights.append(INTERVIEW_PREPARATION)

    # whole days only
    if int(summary.avg_response_time) > SLOW_RESPONSE_DAYS:
        insights.append(LONG_RESPONSE_TIMES)

    applied_count = _bucket_value(buckets, "Applied")
    interview_count = _bucket_value(buckets, "Interview")
    if applied_count > 0 and interview_count > 0:
        if interview_count / applied_count > HIGH_INTERVIEW_RATIO:
            insights.append(HIGH_INTERVIEW_CONVERSION)

    return insights
