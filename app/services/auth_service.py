from app.core.database import AsyncSession
from app.core.auth import AuthUser
from app.core.exceptions import (
    DuplicateUserError,
    IncorrectAnswerError,
    InvalidCredentialsError,
    ProfileNotFoundError,
    UserNotFoundError,
)
from app.core.logging import console_logger
from app.core.security import create_access_token, hash_secret, verify_secret
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.schemas.auth import (
    AuthResponse,
    ForgotPasswordRequest,
    LoginRequest,
    SignupRequest,
    UserProfile,
    UserPublic,
)


class AuthService:
    """Account lifecycle: signup, login, security-question reset and profile lookup"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.user_repo = UserRepository(db)

    @staticmethod
    def _issue(user: User) -> AuthResponse:
        token = create_access_token(subject=str(user.id))
        return AuthResponse(token=token, user=UserPublic.model_validate(user))

    async def signup(self, request: SignupRequest) -> AuthResponse:
        if await self.user_repo.get_by_email(request.email):
            console_logger.info("user.signup_rejected", reason="duplicate_email")
            raise DuplicateUserError()

        # hashed independently, each with its own salt
        user = await self.user_repo.create(
            name=request.name,
            email=request.email,
            password_hash=hash_secret(request.password),
            security_question=request.security_question,
            security_answer_hash=hash_secret(request.security_answer),
        )
        await self.db.commit()

        console_logger.info("user.signup", user_id=str(user.id))
        return self._issue(user)

    async def login(self, request: LoginRequest) -> AuthResponse:
        user = await self.user_repo.get_by_email(request.email)
        # same error for unknown email and wrong password
        if user is None or not verify_secret(request.password, user.password_hash):
            console_logger.info("user.login_failed")
            raise InvalidCredentialsError()

        console_logger.info("user.login", user_id=str(user.id))
        return self._issue(user)

    async def get_security_question(self, email: str) -> str:
        user = await self.user_repo.get_by_email(email)
        if user is None:
            raise UserNotFoundError()
        return user.security_question

    async def reset_password(self, request: ForgotPasswordRequest) -> None:
        user = await self.user_repo.get_by_email(request.email)
        if user is None:
            raise UserNotFoundError()

        if not verify_secret(request.security_answer, user.security_answer_hash):
            console_logger.info("user.password_reset_rejected", user_id=str(user.id))
            raise IncorrectAnswerError()

        await self.user_repo.update_password_hash(user, hash_secret(request.new_password))
        await self.db.commit()
        console_logger.info("user.password_reset", user_id=str(user.id))

    async def get_profile(self, user: AuthUser) -> UserProfile:
        record = await self.user_repo.get_by_id(user.id)
        if record is None:
            raise ProfileNotFoundError()
        return UserProfile.model_validate(record)
