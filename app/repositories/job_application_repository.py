from sqlalchemy import select, delete, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional, Tuple
from datetime import date
from uuid import UUID
from app.core.exceptions import DatastoreError
from app.core.utils.enums import ApplicationStatusEnum
from app.models.job_application import JobApplication


class JobApplicationRepository:
    """Repository for job application database operations (always scoped to one user)"""

    def __init__(self, db_session: AsyncSession):
        self.db_session = db_session

    async def create(self, user_id: UUID, data: dict) -> JobApplication:
        job = JobApplication(user_id=user_id, **data)
        self.db_session.add(job)
        try:
            await self.db_session.flush()
            await self.db_session.refresh(job)
        except SQLAlchemyError as e:
            await self.db_session.rollback()
            raise DatastoreError(details={"operation": "create_job_application"}) from e
        return job

    async def get(self, job_id: int, user_id: UUID) -> Optional[JobApplication]:
        try:
            result = await self.db_session.execute(
                select(JobApplication)
                .where(JobApplication.id == job_id)
                .where(JobApplication.user_id == user_id)  # ownership check
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise DatastoreError(details={"operation": "get_job_application"}) from e

    async def list_for_user(
        self, user_id: UUID, status: Optional[ApplicationStatusEnum] = None
    ) -> List[JobApplication]:
        query = select(JobApplication).where(JobApplication.user_id == user_id)
        if status is not None:
            query = query.where(JobApplication.status == status)
        query = query.order_by(JobApplication.applied_date.desc(), JobApplication.id.desc())
        try:
            result = await self.db_session.execute(query)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise DatastoreError(details={"operation": "list_job_applications"}) from e

    async def update(self, job: JobApplication, changes: dict) -> JobApplication:
        for field, value in changes.items():
            setattr(job, field, value)
        try:
            await self.db_session.flush()
            await self.db_session.refresh(job)
        except SQLAlchemyError as e:
            await self.db_session.rollback()
            raise DatastoreError(details={"operation": "update_job_application"}) from e
        return job

    async def delete(self, job_id: int, user_id: UUID) -> bool:
        try:
            result = await self.db_session.execute(
                delete(JobApplication)
                .where(JobApplication.id == job_id)
                .where(JobApplication.user_id == user_id)
            )
            return (result.rowcount or 0) > 0
        except SQLAlchemyError as e:
            await self.db_session.rollback()
            raise DatastoreError(details={"operation": "delete_job_application"}) from e

    # --- analytics queries ---

    def _scoped(self, query, user_id: UUID, since: Optional[date]):
        query = query.where(JobApplication.user_id == user_id)
        if since is not None:
            query = query.where(JobApplication.applied_date >= since)
        return query

    async def count_by_status(self, user_id: UUID, since: Optional[date] = None) -> dict[ApplicationStatusEnum, int]:
        query = self._scoped(
            select(JobApplication.status, func.count()).select_from(JobApplication), user_id, since
        ).group_by(JobApplication.status)
        try:
            result = await self.db_session.execute(query)
            return {status: count for status, count in result.all()}
        except SQLAlchemyError as e:
            raise DatastoreError(details={"operation": "count_by_status"}) from e

    async def count_by_position_and_status(
        self, user_id: UUID, since: Optional[date] = None
    ) -> List[Tuple[str, ApplicationStatusEnum, int]]:
        query = self._scoped(
            select(JobApplication.position, JobApplication.status, func.count()).select_from(JobApplication),
            user_id,
            since,
        ).group_by(JobApplication.position, JobApplication.status)
        try:
            result = await self.db_session.execute(query)
            return [(position, status, count) for position, status, count in result.all()]
        except SQLAlchemyError as e:
            raise DatastoreError(details={"operation": "count_by_position_and_status"}) from e

    async def list_dates(self, user_id: UUID, since: Optional[date] = None) -> List[Tuple[date, Optional[date]]]:
        """Return (applied_date, response_date) pairs for the time series and response time"""
        query = self._scoped(
            select(JobApplication.applied_date, JobApplication.response_date), user_id, since
        )
        try:
            result = await self.db_session.execute(query)
            return [(applied, responded) for applied, responded in result.all()]
        except SQLAlchemyError as e:
            raise DatastoreError(details={"operation": "list_application_dates"}) from e
