from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from uuid import UUID
from app.core.exceptions import DatastoreError, DuplicateUserError
from app.models.user import User


class UserRepository:
    """Repository for user account database operations"""

    def __init__(self, db_session: AsyncSession):
        self.db_session = db_session

    async def get_by_email(self, email: str) -> Optional[User]:
        try:
            result = await self.db_session.execute(
                select(User).where(User.email == email)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise DatastoreError(details={"operation": "get_user_by_email"}) from e

    async def get_by_id(self, user_id: str | UUID) -> Optional[User]:
        lookup_id = UUID(user_id) if isinstance(user_id, str) else user_id
        try:
            result = await self.db_session.execute(
                select(User).where(User.id == lookup_id)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise DatastoreError(details={"operation": "get_user_by_id"}) from e

    async def create(
        self,
        name: str,
        email: str,
        password_hash: str,
        security_question: str,
        security_answer_hash: str,
    ) -> User:
        """Insert a new user; a unique-email violation becomes DuplicateUserError"""
        user = User(
            name=name,
            email=email,
            password_hash=password_hash,
            security_question=security_question,
            security_answer_hash=security_answer_hash,
        )
        self.db_session.add(user)
        try:
            await self.db_session.flush()  # Get the ID without committing
            await self.db_session.refresh(user)
        except IntegrityError as e:
            await self.db_session.rollback()
            raise DuplicateUserError() from e
        except SQLAlchemyError as e:
            await self.db_session.rollback()
            raise DatastoreError(details={"operation": "create_user"}) from e
        return user

    async def update_password_hash(self, user: User, password_hash: str) -> User:
        user.password_hash = password_hash
        try:
            await self.db_session.flush()
        except SQLAlchemyError as e:
            await self.db_session.rollback()
            raise DatastoreError(details={"operation": "update_password"}) from e
        return user
