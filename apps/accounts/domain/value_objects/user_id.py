"""UserId Value Object."""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from apps.accounts.domain.exceptions.auth import InvalidTokenError
from apps.accounts.domain.value_objects.base import ValueObject


@dataclass(frozen=True, slots=True)
class UserId(ValueObject):
    """사용자 식별자."""

    value: uuid.UUID

    @classmethod
    def generate(cls) -> "UserId":
        """새 UserId 생성."""
        return cls(value=uuid.uuid4())

    @classmethod
    def from_string(cls, raw: str) -> "UserId":
        """토큰 클레임 문자열에서 UserId 생성.

        Raises:
            InvalidTokenError: UUID 형식이 아닌 경우
        """
        try:
            return cls(value=uuid.UUID(raw))
        except (TypeError, ValueError) as e:
            raise InvalidTokenError(f"Malformed user id claim: {raw!r}") from e

    def __str__(self) -> str:
        return str(self.value)
