"""User Exceptions."""

from __future__ import annotations

from apps.accounts.domain.exceptions.base import DomainError


class UserNotFoundError(DomainError):
    """사용자를 찾을 수 없음."""

    code = "NOT_FOUND"

    def __init__(self, identifier: str | None = None) -> None:
        super().__init__("User not found")
        self.identifier = identifier


class ConflictError(DomainError):
    """고유성 제약 위반."""

    code = "CONFLICT"

    def __init__(self, message: str = "Duplicated value") -> None:
        super().__init__(message)


class EmailAlreadyInUseError(ConflictError):
    """이미 사용 중인 이메일."""

    def __init__(self) -> None:
        super().__init__("Email already in use")


class UsernameAlreadyInUseError(ConflictError):
    """이미 사용 중인 사용자명."""

    def __init__(self) -> None:
        super().__init__("Username already in use")
