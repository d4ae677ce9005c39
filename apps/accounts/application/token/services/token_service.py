"""TokenService - 토큰 발급, 검증, 폐기 서비스.

"연주자" 역할: 카테고리별 토큰 발급과 블랙리스트 관리를 담당합니다.
UseCase(지휘자)가 이 서비스를 호출하여 토큰 관련 작업을 위임합니다.
"""

from __future__ import annotations

import logging
import time
import uuid
from typing import TYPE_CHECKING, Callable

from apps.accounts.application.token.dto import AuthTokens
from apps.accounts.domain.enums.token_type import TokenType
from apps.accounts.domain.exceptions.auth import TokenRevokedError

if TYPE_CHECKING:
    from apps.accounts.application.token.ports import RevocationCache, TokenCodec
    from apps.accounts.domain.entities.user import User
    from apps.accounts.domain.value_objects.token_payload import TokenPayload

logger = logging.getLogger(__name__)

BLACKLIST_KEY_PREFIX = "blacklist:"


def blacklist_key(user_id: str, token_id: str) -> str:
    """블랙리스트 키 생성 (``blacklist:{user_id}:{token_id}``)."""
    return f"{BLACKLIST_KEY_PREFIX}{user_id}:{token_id}"


class TokenService:
    """토큰 수명주기 서비스.

    Responsibilities:
        - ACCESS/REFRESH 토큰 쌍 발급 (tokenId 신규 생성 또는 유지)
        - CONFIRMATION/RESET_PASSWORD 토큰 발급
        - 토큰 검증 및 디코딩
        - 리프레시 토큰 블랙리스트 등록/조회

    Collaborators:
        - TokenCodec: 서명/검증
        - RevocationCache: 블랙리스트 저장소
    """

    def __init__(
        self,
        codec: "TokenCodec",
        revocation_cache: "RevocationCache",
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._codec = codec
        self._revocation_cache = revocation_cache
        self._clock = clock

    def issue_auth_pair(
        self,
        user: "User",
        *,
        audience: str | None = None,
        token_id: str | None = None,
    ) -> AuthTokens:
        """ACCESS/REFRESH 토큰 쌍을 발급합니다.

        Args:
            user: 토큰 주체
            audience: 요청 origin
            token_id: 유지할 리프레시 계보 ID (없으면 새로 생성)

        Returns:
            발급된 토큰 쌍
        """
        token_id = token_id or str(uuid.uuid4())
        user_id = str(user.id_)

        access = self._codec.mint(
            TokenType.ACCESS,
            {"id": user_id},
            subject=user.email,
            audience=audience,
        )
        refresh = self._codec.mint(
            TokenType.REFRESH,
            {"id": user_id, "version": user.version, "tokenId": token_id},
            subject=user.email,
            audience=audience,
        )

        logger.info(
            "Auth token pair issued",
            extra={"user_id": user_id, "token_id": token_id, "version": user.version},
        )

        return AuthTokens(
            access_token=access.token,
            refresh_token=refresh.token,
            token_id=token_id,
            access_expires_at=access.expires_at,
            refresh_expires_at=refresh.expires_at,
        )

    def issue_email_token(
        self,
        user: "User",
        token_type: TokenType,
        *,
        audience: str | None = None,
    ) -> str:
        """이메일 링크용 토큰(CONFIRMATION/RESET_PASSWORD)을 발급합니다."""
        if token_type not in (TokenType.CONFIRMATION, TokenType.RESET_PASSWORD):
            raise ValueError(f"Not an email token type: {token_type}")

        minted = self._codec.mint(
            token_type,
            {"id": str(user.id_), "version": user.version},
            subject=user.email,
            audience=audience,
        )
        return minted.token

    def decode_and_validate(self, token: str, expected_type: TokenType) -> "TokenPayload":
        """토큰을 검증하고 디코딩합니다.

        Raises:
            InvalidTokenError: 유효하지 않은 토큰
            TokenExpiredError: 만료된 토큰
        """
        return self._codec.verify(expected_type, token)

    async def ensure_not_blacklisted(self, payload: "TokenPayload") -> None:
        """리프레시 토큰 계보가 폐기되지 않았는지 확인합니다.

        Raises:
            TokenRevokedError: 블랙리스트에 등록됨
        """
        key = blacklist_key(str(payload.user_id), payload.token_id or "")
        if await self._revocation_cache.get(key) is not None:
            logger.info(
                "Blacklisted refresh token rejected",
                extra={"user_id": str(payload.user_id), "token_id": payload.token_id},
            )
            raise TokenRevokedError(payload.token_id or "")

    async def blacklist(self, payload: "TokenPayload") -> bool:
        """리프레시 토큰 계보를 남은 수명만큼 블랙리스트에 등록합니다.

        Returns:
            등록했으면 True, 이미 만료되어 건너뛰었으면 False
        """
        now = int(self._clock())
        remaining = payload.remaining_seconds(now)
        if remaining <= 0:
            return False

        await self._revocation_cache.set(
            blacklist_key(str(payload.user_id), payload.token_id or ""),
            str(now),
            remaining * 1000,
        )
        logger.info(
            "Refresh token blacklisted",
            extra={
                "user_id": str(payload.user_id),
                "token_id": payload.token_id,
                "ttl_seconds": remaining,
            },
        )
        return True
