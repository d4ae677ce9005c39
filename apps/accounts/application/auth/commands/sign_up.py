"""SignUp Command.

회원가입 Use Case입니다. 세션 토큰은 발급하지 않습니다.

Architecture:
    - UseCase(지휘자): SignUpInteractor
    - Services(연주자): PasswordPolicy, UsernameGenerator, TokenService
    - Ports(인프라): UsersQueryGateway, UsersCommandGateway, PasswordHasher,
      Mailer, TransactionManager
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from apps.accounts.application.common.dto import Message
from apps.accounts.application.users.services import format_name
from apps.accounts.domain.entities.user import User
from apps.accounts.domain.enums.token_type import TokenType
from apps.accounts.domain.exceptions.user import EmailAlreadyInUseError
from apps.accounts.domain.value_objects.credentials import Credentials
from apps.accounts.domain.value_objects.email import Email
from apps.accounts.domain.value_objects.user_id import UserId

if TYPE_CHECKING:
    from apps.accounts.application.auth.dto import SignUpRequest
    from apps.accounts.application.common.ports import TransactionManager
    from apps.accounts.application.notifications.ports import Mailer
    from apps.accounts.application.token.services import TokenService
    from apps.accounts.application.users.ports import UsersCommandGateway, UsersQueryGateway
    from apps.accounts.application.users.services import UsernameGenerator
    from apps.accounts.domain.ports.password_hasher import PasswordHasher
    from apps.accounts.domain.services.password_policy import PasswordPolicy

logger = logging.getLogger(__name__)

SIGN_UP_MESSAGE = "Registration Successful.\nCheck your email to confirm your account."


class SignUpInteractor:
    """회원가입 Interactor (지휘자).

    Workflow:
        1. 비밀번호 확인 값 일치 (PasswordPolicy)
        2. 이메일 정규화 및 중복 확인 (UsersQueryGateway)
        3. 이름 정리 및 사용자명 생성 (UsernameGenerator)
        4. 미인증 사용자 저장 (UsersCommandGateway)
        5. 트랜잭션 커밋 (TransactionManager)
        6. CONFIRMATION 토큰 발급 후 메일 발송 예약 (TokenService, Mailer)
    """

    def __init__(
        self,
        # Services (연주자)
        password_policy: "PasswordPolicy",
        username_generator: "UsernameGenerator",
        token_service: "TokenService",
        # Ports (인프라)
        users_query_gateway: "UsersQueryGateway",
        users_command_gateway: "UsersCommandGateway",
        password_hasher: "PasswordHasher",
        mailer: "Mailer",
        transaction_manager: "TransactionManager",
    ) -> None:
        # Services
        self._password_policy = password_policy
        self._username_generator = username_generator
        self._token_service = token_service
        # Ports
        self._users_query_gateway = users_query_gateway
        self._users_command_gateway = users_command_gateway
        self._password_hasher = password_hasher
        self._mailer = mailer
        self._transaction_manager = transaction_manager

    async def execute(self, request: "SignUpRequest") -> Message:
        """미인증 사용자를 생성하고 인증 메일을 보냅니다.

        Raises:
            PasswordMismatchError: 비밀번호 확인 불일치
            InvalidEmailError: 이메일 형식 오류
            EmailAlreadyInUseError: 이미 가입된 이메일
            UsernameAlreadyInUseError: 동시 가입으로 사용자명 충돌
        """
        # 1. 저장소 접근 전에 확인
        self._password_policy.confirm_passwords_match(request.password1, request.password2)

        # 2. 이메일 중복 확인 (최종 판단은 저장소 고유 제약)
        email = Email.normalize(request.email)
        if await self._users_query_gateway.exists_by_email(email.value):
            raise EmailAlreadyInUseError()

        # 3. 이름/사용자명
        name = format_name(request.name)
        username = await self._username_generator.generate(name)

        # 4. 사용자 저장
        now = datetime.now(timezone.utc)
        user = User(
            id_=UserId.generate(),
            email=email.value,
            username=username,
            name=name,
            password_hash=await self._password_hasher.hash(request.password1),
            confirmed=False,
            credentials=Credentials.initial(int(time.time())),
            created_at=now,
            updated_at=now,
        )
        await self._users_command_gateway.add(user)

        # 5. 커밋
        await self._transaction_manager.commit()

        # 6. 인증 메일 (완료를 기다리지 않음)
        token = self._token_service.issue_email_token(
            user, TokenType.CONFIRMATION, audience=request.origin
        )
        self._mailer.send_confirmation_mail(user, token)

        logger.info(
            "User registered",
            extra={"user_id": str(user.id_), "username": user.username, "email": email.masked},
        )
        return Message(message=SIGN_UP_MESSAGE)
