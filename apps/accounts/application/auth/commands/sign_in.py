"""SignIn Command.

이메일 또는 사용자명과 비밀번호로 세션을 발급합니다.

Architecture:
    - UseCase(지휘자): SignInInteractor
    - Services(연주자): UserLookup, PasswordPolicy, TokenService
    - Ports(인프라): PasswordHasher, Mailer
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.accounts.application.auth.dto import AuthResult
from apps.accounts.domain.enums.token_type import TokenType
from apps.accounts.domain.exceptions.auth import (
    EmailNotConfirmedError,
    InvalidCredentialsError,
)

if TYPE_CHECKING:
    from apps.accounts.application.auth.dto import SignInRequest
    from apps.accounts.application.notifications.ports import Mailer
    from apps.accounts.application.token.services import TokenService
    from apps.accounts.application.users.services import UserLookup
    from apps.accounts.domain.ports.password_hasher import PasswordHasher
    from apps.accounts.domain.services.password_policy import PasswordPolicy

logger = logging.getLogger(__name__)


class SignInInteractor:
    """로그인 Interactor (지휘자).

    Workflow:
        1. 식별자로 사용자 조회 (UserLookup)
        2. 현재 비밀번호 검증 (PasswordHasher)
        3. 실패 시 직전 비밀번호 안내 (PasswordPolicy)
        4. 미인증 계정이면 인증 메일 재발송 후 실패 (TokenService, Mailer)
        5. 새 tokenId로 ACCESS/REFRESH 발급 (TokenService)
    """

    def __init__(
        self,
        # Services (연주자)
        user_lookup: "UserLookup",
        password_policy: "PasswordPolicy",
        token_service: "TokenService",
        # Ports (인프라)
        password_hasher: "PasswordHasher",
        mailer: "Mailer",
    ) -> None:
        # Services
        self._user_lookup = user_lookup
        self._password_policy = password_policy
        self._token_service = token_service
        # Ports
        self._password_hasher = password_hasher
        self._mailer = mailer

    async def execute(self, request: "SignInRequest") -> AuthResult:
        """로그인합니다.

        Raises:
            InvalidEmailError: 이메일 형식 오류
            InvalidIdentifierError: 사용자명 형식 오류
            InvalidCredentialsError: 사용자 없음 또는 비밀번호 불일치
            RecentPasswordChangeError: 직전 비밀번호로 시도
            EmailNotConfirmedError: 미인증 계정
        """
        # 1. 사용자 조회
        user = await self._user_lookup.by_email_or_username(request.email_or_username)
        if user is None:
            logger.info("Sign-in failed", extra={"reason": "unknown_identifier"})
            raise InvalidCredentialsError()

        # 2-3. 비밀번호 검증 (항상 실패로 끝남)
        if not await self._password_hasher.verify(user.password_hash, request.password):
            logger.info(
                "Sign-in failed",
                extra={"user_id": str(user.id_), "reason": "wrong_password"},
            )
            await self._password_policy.check_recent_password(user.credentials, request.password)

        # 4. 미인증 계정은 세션을 발급하지 않음
        if not user.confirmed:
            token = self._token_service.issue_email_token(
                user, TokenType.CONFIRMATION, audience=request.origin
            )
            self._mailer.send_confirmation_mail(user, token)
            logger.info(
                "Sign-in blocked for unconfirmed user",
                extra={"user_id": str(user.id_)},
            )
            raise EmailNotConfirmedError()

        # 5. 토큰 발급
        tokens = self._token_service.issue_auth_pair(user, audience=request.origin)
        logger.info("User signed in", extra={"user_id": str(user.id_)})
        return AuthResult(user=user, tokens=tokens)
