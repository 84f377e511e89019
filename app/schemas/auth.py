from pydantic import ConfigDict, Field, field_validator
from datetime import datetime
from uuid import UUID
from app.core.security import BCRYPT_MAX_BYTES
from app.schemas.common import CamelModel, Email


def _check_secret_length(v: str) -> str:
    if len(v.encode("utf-8")) > BCRYPT_MAX_BYTES:
        raise ValueError(f"must be at most {BCRYPT_MAX_BYTES} bytes")
    return v


class SignupRequest(CamelModel):
    """Schema for creating a new account"""
    name: str = Field(..., min_length=1, max_length=255)
    email: Email
    password: str = Field(..., min_length=6)
    security_question: str = Field(..., min_length=1, max_length=1000)
    security_answer: str = Field(..., min_length=1)

    @field_validator('name', 'security_question')
    @classmethod
    def must_not_be_blank(cls, v):
        if not v.strip():
            raise ValueError('cannot be empty or just whitespace')
        return v.strip()

    @field_validator('password', 'security_answer')
    @classmethod
    def secret_length(cls, v):
        return _check_secret_length(v)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ada Lovelace",
                "email": "ada@example.com",
                "password": "analytical-engine",
                "securityQuestion": "Name of your first pet?",
                "securityAnswer": "Babbage",
            }
        }
    )


class LoginRequest(CamelModel):
    email: Email
    password: str


class ForgotPasswordRequest(CamelModel):
    email: Email
    security_answer: str
    new_password: str = Field(..., min_length=6)

    @field_validator('new_password')
    @classmethod
    def secret_length(cls, v):
        return _check_secret_length(v)


class UserPublic(CamelModel):
    """Public identity returned alongside a token"""
    id: UUID
    name: str
    email: str


class AuthResponse(CamelModel):
    token: str
    user: UserPublic


class SecurityQuestionResponse(CamelModel):
    security_question: str


class UserProfile(CamelModel):
    """User record with password and security answer excluded"""
    id: UUID
    name: str
    email: str
    security_question: str
    created_at: datetime
    updated_at: datetime


class ProfileResponse(CamelModel):
    user: UserProfile
