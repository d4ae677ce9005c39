"""In-memory fakes.

저장소/캐시/메일러/해셔의 메모리 구현입니다.
여러 단계 시나리오 테스트에서 실제 코덱과 함께 사용합니다.
"""

from __future__ import annotations

import copy
import time

from apps.accounts.domain.entities.user import User
from apps.accounts.domain.exceptions.auth import StaleCredentialsError
from apps.accounts.domain.exceptions.user import EmailAlreadyInUseError, UsernameAlreadyInUseError
from apps.accounts.domain.value_objects.user_id import UserId


class FakeClock:
    """수동으로 진행하는 시계."""

    def __init__(self, start: float | None = None) -> None:
        self.now = start if start is not None else time.time()

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakePasswordHasher:
    """``hashed:`` 접두사 해셔."""

    async def hash(self, password: str) -> str:
        return f"hashed:{password}"

    async def verify(self, password_hash: str, password: str) -> bool:
        return password_hash == f"hashed:{password}"


class InMemoryUsersStore:
    """UsersQueryGateway + UsersCommandGateway 메모리 구현.

    저장/조회 시 복사본을 사용하므로 update 전 변경은 반영되지 않습니다.
    """

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}

    def _find(self, predicate) -> User | None:
        for user in self.users.values():
            if predicate(user):
                return copy.copy(user)
        return None

    async def get_by_id(self, user_id: UserId) -> User | None:
        return self._find(lambda u: u.id_ == user_id)

    async def get_by_email(self, email: str) -> User | None:
        return self._find(lambda u: u.email == email)

    async def get_by_username(self, username: str) -> User | None:
        return self._find(lambda u: u.username == username)

    async def get_by_credentials(self, user_id: UserId, version: int) -> User | None:
        return self._find(lambda u: u.id_ == user_id and u.version == version)

    async def exists_by_email(self, email: str) -> bool:
        return any(u.email == email for u in self.users.values())

    async def exists_by_username(self, username: str) -> bool:
        return any(u.username == username for u in self.users.values())

    async def count_usernames_like(self, prefix: str) -> int:
        return sum(1 for u in self.users.values() if u.username.startswith(prefix))

    def _check_unique(self, user: User) -> None:
        for other in self.users.values():
            if other.id_ == user.id_:
                continue
            if other.email == user.email:
                raise EmailAlreadyInUseError()
            if other.username == user.username:
                raise UsernameAlreadyInUseError()

    async def add(self, user: User) -> None:
        self._check_unique(user)
        self.users[user.id_] = copy.copy(user)

    async def update(self, user: User, *, expected_version: int) -> None:
        stored = self.users.get(user.id_)
        if stored is None or stored.version != expected_version:
            raise StaleCredentialsError("Concurrent credentials update")
        self._check_unique(user)
        self.users[user.id_] = copy.copy(user)

    async def delete(self, user_id: UserId) -> None:
        self.users.pop(user_id, None)


class InMemoryRevocationCache:
    """RevocationCache 메모리 구현 (만료 포함)."""

    def __init__(self, clock: FakeClock | None = None) -> None:
        self._clock = clock or time.time
        self.entries: dict[str, tuple[str, float]] = {}

    async def set(self, key: str, value: str, ttl_millis: int) -> None:
        self.entries[key] = (value, self._clock() + ttl_millis / 1000)

    async def get(self, key: str) -> str | None:
        entry = self.entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._clock() >= expires_at:
            del self.entries[key]
            return None
        return value


class RecordingMailer:
    """발송 요청을 기록하는 Mailer."""

    def __init__(self) -> None:
        self.confirmations: list[tuple[str, str]] = []
        self.resets: list[tuple[str, str]] = []

    def send_confirmation_mail(self, user: User, token: str) -> None:
        self.confirmations.append((user.email, token))

    def send_reset_password_email(self, user: User, token: str) -> None:
        self.resets.append((user.email, token))


class NoopTransactionManager:
    def __init__(self) -> None:
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        pass
