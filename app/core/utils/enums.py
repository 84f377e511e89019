from enum import Enum


class ApplicationStatusEnum(Enum):
    SAVED = "Saved"
    APPLIED = "Applied"
    INTERVIEW = "Interview"
    OFFER = "Offer"
    REJECTED = "Rejected"


class AnalyticsPeriodEnum(Enum):
    LAST_30_DAYS = "last30days"
    LAST_90_DAYS = "last90days"
    ALL_TIME = "alltime"
