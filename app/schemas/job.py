from pydantic import Field, field_validator
from typing import Optional
from datetime import date, datetime
from app.core.utils.enums import ApplicationStatusEnum
from app.schemas.common import CamelModel


class JobApplicationCreateRequest(CamelModel):
    """Schema for tracking a new job application"""
    company: str = Field(..., min_length=1, max_length=255)
    position: str = Field(..., min_length=1, max_length=255)
    location: Optional[str] = Field(default=None, max_length=255)
    url: Optional[str] = Field(default=None, max_length=2048)
    status: ApplicationStatusEnum = Field(default=ApplicationStatusEnum.APPLIED)
    applied_date: date = Field(default_factory=date.today)
    response_date: Optional[date] = None
    notes: Optional[str] = None

    @field_validator('company', 'position')
    @classmethod
    def must_not_be_blank(cls, v):
        if not v.strip():
            raise ValueError('cannot be empty or just whitespace')
        return v.strip()


class JobApplicationUpdateRequest(CamelModel):
    """Partial update; only fields present in the request body are applied"""
    company: Optional[str] = Field(default=None, min_length=1, max_length=255)
    position: Optional[str] = Field(default=None, min_length=1, max_length=255)
    location: Optional[str] = Field(default=None, max_length=255)
    url: Optional[str] = Field(default=None, max_length=2048)
    status: Optional[ApplicationStatusEnum] = None
    applied_date: Optional[date] = None
    response_date: Optional[date] = None
    notes: Optional[str] = None


class JobApplicationResponse(CamelModel):
    id: int
    company: str
    position: str
    location: Optional[str] = None
    url: Optional[str] = None
    status: ApplicationStatusEnum
    applied_date: date
    response_date: Optional[date] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime
