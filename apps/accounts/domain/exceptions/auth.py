"""Authentication Exceptions.

외부 호출자에게는 실패 사유를 구분하지 않고 일반 메시지만 노출합니다.
상세 사유(reason)는 로그 진단용입니다.
"""

from __future__ import annotations

from apps.accounts.domain.exceptions.base import DomainError

INVALID_TOKEN_MESSAGE = "Invalid or expired token"


class AuthenticationError(DomainError):
    """인증 실패."""

    code = "UNAUTHORIZED"

    def __init__(self, message: str = "Unauthorized", *, reason: str | None = None) -> None:
        super().__init__(message)
        self.reason = reason or message


class InvalidCredentialsError(AuthenticationError):
    """잘못된 자격 증명."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class RecentPasswordChangeError(AuthenticationError):
    """이전 비밀번호로 로그인 시도.

    인증 실패이지만 "비밀번호를 N개월 전에 변경했습니다" 안내 메시지를 노출합니다.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, reason="last_password_match")


class EmailNotConfirmedError(AuthenticationError):
    """이메일 미인증 계정."""

    def __init__(self) -> None:
        super().__init__(
            "Please confirm your email to continue. Confirmation email has been sent."
        )


class InvalidTokenError(AuthenticationError):
    """유효하지 않은 토큰 (서명/발급자/대상/형식 오류)."""

    def __init__(self, reason: str = "Invalid token") -> None:
        super().__init__(INVALID_TOKEN_MESSAGE, reason=reason)


class TokenExpiredError(InvalidTokenError):
    """서명은 유효하지만 만료된 토큰."""

    def __init__(self) -> None:
        super().__init__(reason="Token expired")


class TokenTypeMismatchError(InvalidTokenError):
    """토큰 카테고리 불일치."""

    def __init__(self, expected: str, actual: str) -> None:
        super().__init__(reason=f"Token type mismatch: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class TokenRevokedError(AuthenticationError):
    """블랙리스트에 등록된 토큰."""

    def __init__(self, token_id: str) -> None:
        super().__init__(INVALID_TOKEN_MESSAGE, reason=f"Token revoked: {token_id}")
        self.token_id = token_id


class StaleCredentialsError(AuthenticationError):
    """토큰 발급 이후 자격 증명 버전이 변경됨."""

    def __init__(self, reason: str = "Credentials version mismatch") -> None:
        super().__init__(INVALID_TOKEN_MESSAGE, reason=reason)
