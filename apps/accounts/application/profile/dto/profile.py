"""Profile DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apps.accounts.domain.value_objects.user_id import UserId


@dataclass(frozen=True, slots=True)
class UpdateProfileRequest:
    """이름/사용자명 변경 요청. 둘 중 하나 이상 필요합니다."""

    user_id: "UserId"
    name: str | None = None
    username: str | None = None


@dataclass(frozen=True, slots=True)
class ChangeEmailRequest:
    user_id: "UserId"
    email: str
    password: str
    origin: str | None = None


@dataclass(frozen=True, slots=True)
class DeleteAccountRequest:
    user_id: "UserId"
    password: str
