from fastapi import APIRouter, Body, Depends, Query, Response, status
from typing import List, Optional
from app.core.auth import get_current_user, AuthUser
from app.core.database import AsyncSession, get_db_session
from app.core.utils.enums import AnalyticsPeriodEnum, ApplicationStatusEnum
from app.schemas.analytics import AnalyticsResponse
from app.schemas.job import JobApplicationCreateRequest, JobApplicationResponse, JobApplicationUpdateRequest
from app.services.analytics_service import AnalyticsService
from app.services.job_service import JobService

router = APIRouter(tags=["jobs"])


@router.get("/analytics", response_model=AnalyticsResponse)
async def analytics(
    period: AnalyticsPeriodEnum = Query(AnalyticsPeriodEnum.LAST_30_DAYS),
    user: AuthUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
):
    return await AnalyticsService(db).get_analytics(user, period)


@router.post("", response_model=JobApplicationResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
    payload: JobApplicationCreateRequest = Body(...),
    user: AuthUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
):
    return await JobService(db).create(user, payload)


@router.get("", response_model=List[JobApplicationResponse])
async def list_jobs(
    status_filter: Optional[ApplicationStatusEnum] = Query(None, alias="status"),
    user: AuthUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
):
    return await JobService(db).list_for_user(user, status_filter)


@router.get("/{job_id}", response_model=JobApplicationResponse)
async def get_job(job_id: int, user: AuthUser = Depends(get_current_user), db: AsyncSession = Depends(get_db_session)):
    return await JobService(db).get(user, job_id)


@router.patch("/{job_id}", response_model=JobApplicationResponse)
async def update_job(
    job_id: int,
    payload: JobApplicationUpdateRequest = Body(...),
    user: AuthUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
):
    return await JobService(db).update(user, job_id, payload)


@router.delete("/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_job(job_id: int, user: AuthUser = Depends(get_current_user), db: AsyncSession = Depends(get_db_session)):
    await JobService(db).delete(user, job_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
