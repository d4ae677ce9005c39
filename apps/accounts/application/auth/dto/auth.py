"""Auth DTOs.

HTTP 계층에서 형식 검증을 마친 값만 담습니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apps.accounts.application.token.dto import AuthTokens
    from apps.accounts.domain.entities.user import User
    from apps.accounts.domain.value_objects.user_id import UserId


@dataclass(frozen=True, slots=True)
class SignUpRequest:
    """회원가입 요청."""

    name: str
    email: str
    password1: str
    password2: str
    origin: str | None = None


@dataclass(frozen=True, slots=True)
class SignInRequest:
    """로그인 요청. 식별자는 이메일 또는 사용자명."""

    email_or_username: str
    password: str
    origin: str | None = None


@dataclass(frozen=True, slots=True)
class RefreshTokensRequest:
    refresh_token: str
    origin: str | None = None


@dataclass(frozen=True, slots=True)
class LogoutRequest:
    refresh_token: str


@dataclass(frozen=True, slots=True)
class ConfirmEmailRequest:
    confirmation_token: str
    origin: str | None = None


@dataclass(frozen=True, slots=True)
class ForgotPasswordRequest:
    email: str
    origin: str | None = None


@dataclass(frozen=True, slots=True)
class ResetPasswordRequest:
    reset_token: str
    password1: str
    password2: str


@dataclass(frozen=True, slots=True)
class ChangePasswordRequest:
    """비밀번호 변경 요청 (인증 필요)."""

    user_id: "UserId"
    password: str
    password1: str
    password2: str
    origin: str | None = None


@dataclass(frozen=True, slots=True)
class AuthResult:
    """세션 발급 결과.

    presentation 계층에서 AuthResponse 본문과 리프레시 쿠키로 나뉩니다.
    """

    user: "User"
    tokens: "AuthTokens"
