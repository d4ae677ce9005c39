"""TokenPayload Value Object."""

from __future__ import annotations

from dataclasses import dataclass

from apps.accounts.domain.enums.token_type import TokenType
from apps.accounts.domain.value_objects.base import ValueObject
from apps.accounts.domain.value_objects.user_id import UserId


@dataclass(frozen=True, slots=True)
class TokenPayload(ValueObject):
    """검증된 토큰 클레임.

    Attributes:
        user_id: 클레임 ``id``
        token_type: 토큰 카테고리
        subject: 클레임 ``sub`` (사용자 이메일)
        audience: 클레임 ``aud``
        iat: 발급 시각
        exp: 만료 시각
        version: 자격 증명 버전 (ACCESS 제외)
        token_id: 리프레시 토큰 계보 식별자 (REFRESH 전용)
    """

    user_id: UserId
    token_type: TokenType
    subject: str
    audience: str
    iat: int
    exp: int
    version: int | None = None
    token_id: str | None = None

    def remaining_seconds(self, now: int) -> int:
        """만료까지 남은 시간(초). 이미 만료되었으면 0 이하."""
        return self.exp - now
