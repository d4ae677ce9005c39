"""User Entity.

영속성과 분리된 순수 도메인 엔티티입니다.
테이블 정의는 infrastructure/persistence_postgres/mappings/users.py에 있습니다.
"""

from __future__ import annotations

from datetime import datetime, timezone

from apps.accounts.domain.entities.base import Entity
from apps.accounts.domain.value_objects.credentials import Credentials
from apps.accounts.domain.value_objects.user_id import UserId


class User(Entity[UserId]):
    """사용자 엔티티.

    Attributes:
        id_: 사용자 고유 식별자
        email: 정규화된 이메일
        username: 고유 사용자명 (slug)
        name: 표시 이름
        password_hash: 현재 비밀번호 해시
        confirmed: 이메일 인증 여부
        credentials: 자격 증명 세대 정보
        created_at: 생성 시각
        updated_at: 수정 시각
    """

    __slots__ = (
        "email",
        "username",
        "name",
        "password_hash",
        "confirmed",
        "credentials",
        "created_at",
        "updated_at",
    )

    def __init__(
        self,
        *,
        id_: UserId,
        email: str,
        username: str,
        name: str,
        password_hash: str,
        confirmed: bool = False,
        credentials: Credentials | None = None,
        created_at: datetime,
        updated_at: datetime,
    ) -> None:
        super().__init__(id_=id_)
        self.email = email
        self.username = username
        self.name = name
        self.password_hash = password_hash
        self.confirmed = confirmed
        self.credentials = credentials or Credentials()
        self.created_at = created_at
        self.updated_at = updated_at

    @property
    def version(self) -> int:
        """현재 자격 증명 버전."""
        return self.credentials.version

    def confirm(self) -> None:
        """이메일 인증 완료 처리."""
        self.confirmed = True
        self.touch()

    def touch(self) -> None:
        """수정 시각 갱신."""
        self.updated_at = datetime.now(timezone.utc)

    def __repr__(self) -> str:
        return f"User(id_={self.id_}, username={self.username!r}, confirmed={self.confirmed})"
