"""Credentials Value Object.

User에 내장된 자격 증명 상태입니다. 수명주기 명령만 새 값을 만들어 교체합니다.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from apps.accounts.domain.value_objects.base import ValueObject


@dataclass(frozen=True, slots=True)
class Credentials(ValueObject):
    """자격 증명 세대 정보.

    Attributes:
        version: 자격 증명 버전. 단조 증가하며 리프레시/인증/재설정 토큰에 포함됩니다.
        last_password: 직전 비밀번호 해시 (최초 변경 전에는 빈 문자열)
        password_updated_at: 마지막 비밀번호 변경 시각 (Unix timestamp)
        updated_at: 마지막 자격 증명 변경 시각 (Unix timestamp)
    """

    version: int = 0
    last_password: str = ""
    password_updated_at: int = 0
    updated_at: int = 0

    @classmethod
    def initial(cls, now: int) -> "Credentials":
        """신규 가입 사용자의 초기 자격 증명."""
        return cls(version=0, last_password="", password_updated_at=now, updated_at=now)

    @property
    def has_last_password(self) -> bool:
        return bool(self.last_password)

    def bumped(self, now: int) -> "Credentials":
        """버전만 올린 새 자격 증명 (이메일 변경, 이메일 인증)."""
        return replace(self, version=self.version + 1, updated_at=now)

    def with_password_change(self, previous_hash: str, now: int) -> "Credentials":
        """비밀번호 변경을 반영한 새 자격 증명."""
        return replace(
            self,
            version=self.version + 1,
            last_password=previous_hash,
            password_updated_at=now,
            updated_at=now,
        )
