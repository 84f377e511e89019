from typing import List, Optional
from app.core.database import AsyncSession
from app.core.auth import AuthUser
from app.core.exceptions import JobNotFoundError, ValidationError
from app.core.logging import console_logger
from app.core.utils.enums import ApplicationStatusEnum
from app.models.job_application import JobApplication
from app.repositories.job_application_repository import JobApplicationRepository
from app.schemas.job import JobApplicationCreateRequest, JobApplicationUpdateRequest


def _check_dates(applied_date, response_date) -> None:
    if response_date is not None and applied_date is not None and response_date < applied_date:
        raise ValidationError("responseDate cannot be before appliedDate")


class JobService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.job_repo = JobApplicationRepository(db)

    async def create(self, user: AuthUser, request: JobApplicationCreateRequest) -> JobApplication:
        _check_dates(request.applied_date, request.response_date)
        job = await self.job_repo.create(user.id, request.model_dump())
        await self.db.commit()
        console_logger.info("job_application.created", user_id=user.id_str, job_id=job.id)
        return job

    async def list_for_user(self, user: AuthUser, status: Optional[ApplicationStatusEnum] = None) -> List[JobApplication]:
        return await self.job_repo.list_for_user(user.id, status)

    async def get(self, user: AuthUser, job_id: int) -> JobApplication:
        job = await self.job_repo.get(job_id, user.id)
        if job is None:
            raise JobNotFoundError()
        return job

    async def update(self, user: AuthUser, job_id: int, request: JobApplicationUpdateRequest) -> JobApplication:
        job = await self.get(user, job_id)
        changes = request.model_dump(exclude_unset=True)
        for required in ("company", "position", "status", "applied_date"):
            if required in changes and changes[required] is None:
                raise ValidationError(f"{required} cannot be null")

        _check_dates(
            changes.get("applied_date", job.applied_date),
            changes.get("response_date", job.response_date),
        )
        job = await self.job_repo.update(job, changes)
        await self.db.commit()
        console_logger.info("job_application.updated", user_id=user.id_str, job_id=job.id, fields=sorted(changes))
        return job

    async def delete(self, user: AuthUser, job_id: int) -> None:
        if not await self.job_repo.delete(job_id, user.id):
            raise JobNotFoundError()
        await self.db.commit()
        console_logger.info("job_application.deleted", user_id=user.id_str, job_id=job_id)
