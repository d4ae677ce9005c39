"""Validation Exceptions.

호출자 입력이 잘못된 경우입니다. 메시지를 그대로 노출해도 안전합니다.
"""

from __future__ import annotations

from apps.accounts.domain.exceptions.base import DomainError


class ValidationError(DomainError):
    """입력 검증 실패."""

    code = "VALIDATION_FAILED"

    def __init__(self, message: str = "Validation failed") -> None:
        super().__init__(message)


class InvalidEmailError(ValidationError):
    """유효하지 않은 이메일."""

    def __init__(self, message: str = "Invalid email") -> None:
        super().__init__(message)


class InvalidIdentifierError(ValidationError):
    """유효하지 않은 사용자명 (로그인 식별자)."""

    def __init__(self, message: str = "Invalid username") -> None:
        super().__init__(message)


class PasswordMismatchError(ValidationError):
    """비밀번호 확인 값 불일치."""

    def __init__(self) -> None:
        super().__init__("Passwords do not match")


class InvalidPasswordError(ValidationError):
    """인증된 사용자의 현재 비밀번호 확인 실패."""

    def __init__(self, message: str = "Invalid password") -> None:
        super().__init__(message)


class PasswordReuseError(ValidationError):
    """재사용 제한 기간 내의 비밀번호."""

    def __init__(self, message: str = "Password was used recently") -> None:
        super().__init__(message)


class NoChangesProvidedError(ValidationError):
    """변경 사항 없음."""

    def __init__(self, message: str = "No changes provided") -> None:
        super().__init__(message)


class EmailAlreadyConfirmedError(ValidationError):
    """이미 인증된 이메일."""

    def __init__(self) -> None:
        super().__init__("Email already confirmed")
