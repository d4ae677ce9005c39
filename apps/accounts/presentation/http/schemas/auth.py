"""Auth HTTP Schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from apps.accounts.presentation.http.schemas.common import (
    CamelModel,
    check_name,
    check_password,
)


class PasswordsBody(CamelModel):
    """새 비밀번호와 확인 값."""

    password1: str = Field(..., min_length=8, max_length=35, description="새 비밀번호")
    password2: str = Field(..., min_length=8, description="새 비밀번호 확인")

    @field_validator("password1")
    @classmethod
    def _check_password1(cls, value: str) -> str:
        return check_password(value)


class SignUpBody(PasswordsBody):
    name: str = Field(..., min_length=3, max_length=50, description="이름")
    email: EmailStr = Field(..., description="이메일")

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return check_name(value)


class SignInBody(CamelModel):
    email_or_username: str = Field(
        ..., min_length=3, max_length=255, description="이메일 또는 사용자명"
    )
    password: str = Field(..., min_length=1, max_length=35, description="비밀번호")


class ConfirmEmailBody(CamelModel):
    confirmation_token: str = Field(..., min_length=1, description="인증 토큰")


class EmailBody(CamelModel):
    email: EmailStr = Field(..., description="이메일")


class ResetPasswordBody(PasswordsBody):
    reset_token: str = Field(..., min_length=1, description="재설정 토큰")


class ChangePasswordBody(PasswordsBody):
    password: str = Field(..., min_length=1, description="현재 비밀번호")


class AuthResponseUser(CamelModel):
    """본인 정보 (이메일 포함)."""

    id: UUID = Field(..., description="사용자 ID")
    name: str = Field(..., description="이름")
    username: str = Field(..., description="사용자명")
    email: str = Field(..., description="이메일")
    created_at: datetime = Field(..., description="생성 시각")
    updated_at: datetime = Field(..., description="수정 시각")


class AuthResponse(CamelModel):
    """세션 발급 응답. 리프레시 토큰은 쿠키로만 전달됩니다."""

    user: AuthResponseUser
    access_token: str = Field(..., description="액세스 토큰")
