"""TokenCodec Port.

카테고리별 서명 토큰 발급/검증을 위한 Gateway 인터페이스입니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from apps.accounts.domain.enums.token_type import TokenType
from apps.accounts.domain.value_objects.token_payload import TokenPayload


@dataclass(frozen=True, slots=True)
class MintedToken:
    """발급된 토큰과 만료 시각."""

    token: str
    expires_at: int


class TokenCodec(Protocol):
    """토큰 코덱 인터페이스.

    카테고리마다 키, 알고리즘, 만료 시간을 따로 가집니다.

    구현체:
        - JoseTokenCodec (infrastructure/security/)
    """

    def mint(
        self,
        token_type: TokenType,
        claims: dict[str, Any],
        *,
        subject: str,
        audience: str | None = None,
    ) -> MintedToken:
        """토큰 발급.

        Args:
            token_type: 토큰 카테고리
            claims: 카테고리별 클레임 (id, version, tokenId)
            subject: 사용자 이메일
            audience: 요청 origin (없으면 기본 도메인)

        Raises:
            TokenSigningError: 서명 백엔드 실패
        """
        ...

    def verify(self, token_type: TokenType, token: str) -> TokenPayload:
        """토큰 검증 및 디코딩.

        Raises:
            TokenExpiredError: 서명은 유효하지만 만료됨
            InvalidTokenError: 그 밖의 모든 검증 실패
        """
        ...
