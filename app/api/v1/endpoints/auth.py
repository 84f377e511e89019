from fastapi import APIRouter, Body, Depends, Query, status
from app.core.auth import get_current_user, AuthUser
from app.core.database import AsyncSession, get_db_session
from app.schemas.auth import (
    AuthResponse,
    ForgotPasswordRequest,
    LoginRequest,
    ProfileResponse,
    SecurityQuestionResponse,
    SignupRequest,
)
from app.schemas.common import Email, MessageResponse
from app.services.auth_service import AuthService

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def signup(payload: SignupRequest = Body(...), db: AsyncSession = Depends(get_db_session)):
    return await AuthService(db).signup(payload)


@router.post("/login", response_model=AuthResponse)
async def login(payload: LoginRequest = Body(...), db: AsyncSession = Depends(get_db_session)):
    return await AuthService(db).login(payload)


@router.get("/security-question", response_model=SecurityQuestionResponse)
async def security_question(
    email: Email = Query(..., description="Account email"),
    db: AsyncSession = Depends(get_db_session),
):
    question = await AuthService(db).get_security_question(email)
    return SecurityQuestionResponse(security_question=question)


@router.get("/me", response_model=ProfileResponse)
async def me(user: AuthUser = Depends(get_current_user), db: AsyncSession = Depends(get_db_session)):
    profile = await AuthService(db).get_profile(user)
    return ProfileResponse(user=profile)


@router.post("/forgot-password", response_model=MessageResponse)
async def forgot_password(payload: ForgotPasswordRequest = Body(...), db: AsyncSession = Depends(get_db_session)):
    await AuthService(db).reset_password(payload)
    return MessageResponse(message="Password updated successfully")
