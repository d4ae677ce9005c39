"""RefreshTokens Command.

토큰 갱신 Use Case입니다. 새 토큰 쌍은 기존 tokenId를 그대로 유지합니다.

Architecture:
    - UseCase(지휘자): RefreshTokensInteractor
    - Services(연주자): TokenService
    - Ports(인프라): UsersQueryGateway
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.accounts.application.auth.dto import AuthResult
from apps.accounts.domain.enums.token_type import TokenType
from apps.accounts.domain.exceptions.auth import StaleCredentialsError

if TYPE_CHECKING:
    from apps.accounts.application.auth.dto import RefreshTokensRequest
    from apps.accounts.application.token.services import TokenService
    from apps.accounts.application.users.ports import UsersQueryGateway

logger = logging.getLogger(__name__)


class RefreshTokensInteractor:
    """토큰 갱신 Interactor (지휘자).

    Workflow:
        1. Refresh 토큰 검증 (TokenService)
        2. 블랙리스트 확인 (TokenService)
        3. (id, version)으로 사용자 조회 (UsersQueryGateway)
        4. 같은 tokenId로 새 토큰 발급 (TokenService)
    """

    def __init__(
        self,
        # Services (연주자)
        token_service: "TokenService",
        # Ports (인프라)
        users_query_gateway: "UsersQueryGateway",
    ) -> None:
        # Services
        self._token_service = token_service
        # Ports
        self._users_query_gateway = users_query_gateway

    async def execute(self, request: "RefreshTokensRequest") -> AuthResult:
        """토큰을 갱신합니다.

        Raises:
            InvalidTokenError: 유효하지 않거나 만료된 토큰
            TokenRevokedError: 로그아웃된 토큰 계보
            StaleCredentialsError: 발급 이후 자격 증명 버전이 바뀜
        """
        # 1. 검증
        payload = self._token_service.decode_and_validate(
            request.refresh_token, expected_type=TokenType.REFRESH
        )

        # 2. 블랙리스트
        await self._token_service.ensure_not_blacklisted(payload)

        # 3. 버전 확인
        user = await self._users_query_gateway.get_by_credentials(
            payload.user_id, payload.version or 0
        )
        if user is None:
            logger.info(
                "Refresh rejected",
                extra={"user_id": str(payload.user_id), "reason": "version_mismatch"},
            )
            raise StaleCredentialsError()

        # 4. 같은 계보로 재발급
        tokens = self._token_service.issue_auth_pair(
            user, audience=request.origin, token_id=payload.token_id
        )
        logger.info(
            "Session refreshed",
            extra={"user_id": str(user.id_), "token_id": tokens.token_id},
        )
        return AuthResult(user=user, tokens=tokens)
