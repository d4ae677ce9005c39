"""Jose Token Codec.

TokenCodec 포트의 구현체입니다.
ACCESS는 RS256, 나머지 카테고리는 카테고리별 비밀키로 HS256 서명합니다.
"""

from __future__ import annotations

import logging
import re
import time
import uuid
from typing import Any, Callable, Mapping

from jose import ExpiredSignatureError, JOSEError, jwt

from apps.accounts.application.common.exceptions import TokenSigningError
from apps.accounts.application.token.ports import MintedToken
from apps.accounts.domain.enums.token_type import TokenType
from apps.accounts.domain.exceptions.auth import (
    InvalidTokenError,
    TokenExpiredError,
    TokenTypeMismatchError,
)
from apps.accounts.domain.value_objects.token_payload import TokenPayload
from apps.accounts.domain.value_objects.user_id import UserId
from apps.accounts.infrastructure.security.token_config import TokenConfig

logger = logging.getLogger(__name__)

# iat 시계 오차 허용 (초)
CLOCK_SKEW_SECONDS = 5


class JoseTokenCodec:
    """python-jose 기반 토큰 코덱.

    TokenCodec 구현체.

    검증 항목:
        - 서명, 만료 (jose)
        - 발급자 (app_id)
        - 대상: 설정된 도메인 패턴이 aud에 포함되는지
        - 카테고리: ``type`` 클레임
        - 수명: now - iat 가 카테고리 수명 이하
    """

    def __init__(
        self,
        configs: Mapping[TokenType, TokenConfig],
        *,
        issuer: str,
        domain: str,
        clock: Callable[[], float] = time.time,
    ) -> None:
        missing = set(TokenType) - set(configs)
        if missing:
            raise ValueError(f"Missing token configs: {sorted(t.value for t in missing)}")
        self._configs = dict(configs)
        self._issuer = issuer
        self._domain = domain
        self._audience_pattern = re.compile(re.escape(domain))
        self._clock = clock

    def _now(self) -> int:
        return int(self._clock())

    def mint(
        self,
        token_type: TokenType,
        claims: dict[str, Any],
        *,
        subject: str,
        audience: str | None = None,
    ) -> MintedToken:
        config = self._configs[token_type]
        now = self._now()
        expires_at = now + config.lifetime_seconds

        payload: dict[str, Any] = {
            **claims,
            "type": token_type.value,
            "sub": subject,
            "iss": self._issuer,
            "aud": audience or self._domain,
            "iat": now,
            "exp": expires_at,
            "jti": str(uuid.uuid4()),
        }

        try:
            token = jwt.encode(payload, config.signing_key, algorithm=config.algorithm)
        except JOSEError as e:
            logger.exception(
                "Token signing failed",
                extra={"token_type": token_type.value},
            )
            raise TokenSigningError() from e
        return MintedToken(token=token, expires_at=expires_at)

    def verify(self, token_type: TokenType, token: str) -> TokenPayload:
        config = self._configs[token_type]
        try:
            claims = jwt.decode(
                token,
                config.verify_key,
                algorithms=[config.algorithm],
                issuer=self._issuer,
                options={"verify_aud": False},
            )
        except ExpiredSignatureError as e:
            raise TokenExpiredError() from e
        except JOSEError as e:
            raise InvalidTokenError(str(e)) from e

        actual_type = claims.get("type")
        if actual_type != token_type.value:
            raise TokenTypeMismatchError(expected=token_type.value, actual=str(actual_type))

        audience = claims.get("aud")
        if not isinstance(audience, str) or not self._audience_pattern.search(audience):
            raise InvalidTokenError(f"Audience not allowed: {audience!r}")

        iat = claims.get("iat")
        if not isinstance(iat, int):
            raise InvalidTokenError("Missing iat claim")
        if self._now() - iat > config.lifetime_seconds + CLOCK_SKEW_SECONDS:
            raise TokenExpiredError()

        return self._to_payload(token_type, claims)

    @staticmethod
    def _to_payload(token_type: TokenType, claims: dict[str, Any]) -> TokenPayload:
        version = claims.get("version")
        token_id = claims.get("tokenId")

        if token_type.is_version_bound and not isinstance(version, int):
            raise InvalidTokenError("Missing version claim")
        if token_type is TokenType.REFRESH and not token_id:
            raise InvalidTokenError("Missing tokenId claim")

        return TokenPayload(
            user_id=UserId.from_string(str(claims.get("id", ""))),
            token_type=token_type,
            subject=claims.get("sub", ""),
            audience=claims["aud"],
            iat=claims["iat"],
            exp=claims["exp"],
            version=version,
            token_id=token_id,
        )
