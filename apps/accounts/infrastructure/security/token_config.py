"""Token category configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TokenConfig:
    """토큰 카테고리별 서명 설정.

    Attributes:
        signing_key: 서명 키 (RS256은 PEM 개인키, HS256은 공유 비밀)
        verify_key: 검증 키 (RS256은 PEM 공개키, HS256은 signing_key와 동일)
        algorithm: JWT 알고리즘
        lifetime_seconds: 만료 시간이자 검증 시 최대 수명
    """

    signing_key: str
    verify_key: str
    algorithm: str
    lifetime_seconds: int

    @classmethod
    def symmetric(cls, secret: str, lifetime_seconds: int) -> "TokenConfig":
        return cls(
            signing_key=secret,
            verify_key=secret,
            algorithm="HS256",
            lifetime_seconds=lifetime_seconds,
        )
