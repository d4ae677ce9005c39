"""Users HTTP Schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from apps.accounts.presentation.http.schemas.common import CamelModel, check_name

SLUG_PATTERN = r"^[a-z\d]+(?:[.\-_][a-z\d]+)*$"


class ResponseUser(CamelModel):
    """공개 프로필 (이메일 제외)."""

    id: UUID = Field(..., description="사용자 ID")
    name: str = Field(..., description="이름")
    username: str = Field(..., description="사용자명")
    created_at: datetime = Field(..., description="생성 시각")
    updated_at: datetime = Field(..., description="수정 시각")


class UpdateUserBody(CamelModel):
    username: Optional[str] = Field(
        None, min_length=3, max_length=106, pattern=SLUG_PATTERN, description="사용자명"
    )
    name: Optional[str] = Field(None, min_length=3, max_length=100, description="이름")

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else check_name(value)


class ChangeEmailBody(CamelModel):
    email: EmailStr = Field(..., description="새 이메일")
    password: str = Field(..., min_length=1, description="현재 비밀번호")


class PasswordBody(CamelModel):
    password: str = Field(..., min_length=1, description="현재 비밀번호")
