"""PasswordPolicy Domain Service.

비밀번호 확인 일치, 직전 비밀번호 안내, 재사용 제한, 자격 증명 버전 갱신을 담당합니다.
해시 계산은 PasswordHasher 포트에 위임합니다.
"""

from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Callable, NoReturn

from apps.accounts.domain.exceptions.auth import (
    InvalidCredentialsError,
    RecentPasswordChangeError,
)
from apps.accounts.domain.exceptions.validation import (
    InvalidPasswordError,
    PasswordMismatchError,
    PasswordReuseError,
)

if TYPE_CHECKING:
    from apps.accounts.domain.entities.user import User
    from apps.accounts.domain.ports.password_hasher import PasswordHasher
    from apps.accounts.domain.value_objects.credentials import Credentials

RECENT_CHANGE_PREFIX = "You changed your password "
DEFAULT_REUSE_COOLDOWN = timedelta(days=30)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count > 1 else ''} ago"


def _months_between(earlier: datetime, later: datetime) -> int:
    """두 시각 사이의 완전한 개월 수."""
    months = (later.year - earlier.year) * 12 + (later.month - earlier.month)
    if (later.day, later.time()) < (earlier.day, earlier.time()):
        months -= 1
    return max(months, 0)


def describe_elapsed(changed_at: int, now: int) -> str:
    """비밀번호 변경 후 경과 시간을 안내 문구로 변환.

    1개월 이상이면 개월, 1일 이상이면 일, 1시간 이상이면 시간 단위로 표시하고
    그보다 짧으면 "recently"를 사용합니다.
    """
    then = datetime.fromtimestamp(changed_at, tz=timezone.utc)
    current = datetime.fromtimestamp(now, tz=timezone.utc)

    months = _months_between(then, current)
    if months > 0:
        return RECENT_CHANGE_PREFIX + _plural(months, "month")

    elapsed = max(now - changed_at, 0)
    days = elapsed // 86400
    if days > 0:
        return RECENT_CHANGE_PREFIX + _plural(days, "day")

    hours = elapsed // 3600
    if hours > 0:
        return RECENT_CHANGE_PREFIX + _plural(hours, "hour")

    return RECENT_CHANGE_PREFIX + "recently"


class PasswordPolicy:
    """비밀번호 정책 도메인 서비스.

    Responsibilities:
        - 비밀번호 확인 값 일치 검증
        - 현재 비밀번호 검증 실패 시 직전 비밀번호 안내 메시지 생성
        - 재사용 제한 기간 내 직전 비밀번호 재사용 차단
        - 자격 증명 버전 갱신 (이메일 변경, 비밀번호 변경)
    """

    def __init__(
        self,
        hasher: "PasswordHasher",
        *,
        reuse_cooldown: timedelta = DEFAULT_REUSE_COOLDOWN,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._hasher = hasher
        self._reuse_cooldown = reuse_cooldown
        self._clock = clock

    def _now(self) -> int:
        return int(self._clock())

    @staticmethod
    def confirm_passwords_match(password1: str, password2: str) -> None:
        """두 비밀번호가 같은지 확인합니다.

        Raises:
            PasswordMismatchError: 불일치
        """
        if password1 != password2:
            raise PasswordMismatchError()

    async def check_recent_password(self, credentials: "Credentials", candidate: str) -> NoReturn:
        """현재 비밀번호 검증이 실패한 뒤 직전 비밀번호와 비교합니다.

        직전 비밀번호와 일치해도 인증은 항상 실패합니다.
        일치하면 변경 시점을 알려주는 메시지로, 아니면 일반 메시지로 실패합니다.

        Raises:
            InvalidCredentialsError: 직전 비밀번호가 없거나 불일치
            RecentPasswordChangeError: 직전 비밀번호와 일치
        """
        if not credentials.has_last_password or not await self._hasher.verify(
            credentials.last_password, candidate
        ):
            raise InvalidCredentialsError()

        raise RecentPasswordChangeError(
            describe_elapsed(credentials.password_updated_at, self._now())
        )

    async def verify_current_password(self, user: "User", password: str) -> None:
        """인증된 사용자의 현재 비밀번호를 확인합니다.

        Raises:
            InvalidPasswordError: 불일치
        """
        if not await self._hasher.verify(user.password_hash, password):
            raise InvalidPasswordError()

    async def ensure_can_use(self, user: "User", candidate: str, *, check_current: bool) -> None:
        """새 비밀번호로 사용할 수 있는지 확인합니다.

        Args:
            user: 대상 사용자
            candidate: 새 비밀번호
            check_current: 현재 비밀번호와 같으면 거부할지 여부

        Raises:
            InvalidPasswordError: 현재 비밀번호와 동일
            PasswordReuseError: 재사용 제한 기간 내 직전 비밀번호
        """
        if check_current and await self._hasher.verify(user.password_hash, candidate):
            raise InvalidPasswordError("New password must be different")

        credentials = user.credentials
        if not credentials.has_last_password:
            return
        if self._now() - credentials.password_updated_at >= self._reuse_cooldown.total_seconds():
            return
        if await self._hasher.verify(credentials.last_password, candidate):
            raise PasswordReuseError()

    def bump_version(self, credentials: "Credentials") -> "Credentials":
        """버전을 올리고 updated_at을 갱신한 자격 증명을 반환합니다."""
        return credentials.bumped(self._now())

    async def record_password_change(self, user: "User", new_password: str) -> None:
        """새 비밀번호를 사용자에게 반영합니다.

        버전을 올리고, 교체되는 해시를 last_password에 보관합니다.
        새 평문 비밀번호는 어디에도 저장하지 않으며, 재사용 검사와
        check_recent_password는 이 해시에 대해 hasher.verify로 비교합니다.
        """
        new_hash = await self._hasher.hash(new_password)
        user.credentials = user.credentials.with_password_change(user.password_hash, self._now())
        user.password_hash = new_hash
        user.touch()
