"""TokenType Enum.

토큰 카테고리를 정의합니다.
카테고리마다 서명 키, 알고리즘, 만료 시간이 분리됩니다.
"""

from enum import Enum


class TokenType(str, Enum):
    """토큰 카테고리."""

    ACCESS = "access"
    """API 호출용 단기 토큰 (RS256)."""

    REFRESH = "refresh"
    """토큰 쌍 재발급용 장기 토큰 (HS256)."""

    CONFIRMATION = "confirmation"
    """이메일 인증 토큰 (HS256)."""

    RESET_PASSWORD = "reset_password"
    """비밀번호 재설정 토큰 (HS256)."""

    @property
    def is_version_bound(self) -> bool:
        """자격 증명 버전이 클레임에 포함되는 카테고리인지 여부."""
        return self is not TokenType.ACCESS
