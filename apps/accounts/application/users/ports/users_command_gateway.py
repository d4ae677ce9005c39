"""UsersCommandGateway Port.

사용자 쓰기 작업을 위한 Gateway 인터페이스입니다.
"""

from typing import Protocol

from apps.accounts.domain.entities.user import User
from apps.accounts.domain.value_objects.user_id import UserId


class UsersCommandGateway(Protocol):
    """사용자 Command Gateway (쓰기 작업).

    커밋은 TransactionManager에서 처리합니다.

    구현체:
        - SqlaUsersCommandGateway (infrastructure/persistence_postgres/adapters/)
    """

    async def add(self, user: User) -> None:
        """새 사용자 추가.

        Raises:
            EmailAlreadyInUseError: 이메일 고유성 위반
            UsernameAlreadyInUseError: 사용자명 고유성 위반
        """
        ...

    async def update(self, user: User, *, expected_version: int) -> None:
        """사용자 정보 업데이트.

        Args:
            user: 업데이트할 사용자
            expected_version: 읽은 시점의 자격 증명 버전. 저장소의 현재 버전이 이 값일 때만 갱신합니다.

        Raises:
            StaleCredentialsError: expected_version 불일치
            ConflictError: 고유성 위반
        """
        ...

    async def delete(self, user_id: UserId) -> None:
        """사용자 삭제."""
        ...
