"""Dependency Injection Setup.

FastAPI Depends를 사용한 의존성 주입 설정입니다.
구체 어댑터를 포트에 연결하는 유일한 위치입니다.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from fastapi import Depends

from apps.accounts.application.auth.commands import (
    ChangePasswordInteractor,
    ConfirmEmailInteractor,
    ForgotPasswordInteractor,
    LogoutInteractor,
    RefreshTokensInteractor,
    ResetPasswordInteractor,
    SignInInteractor,
    SignUpInteractor,
)
from apps.accounts.application.profile.commands import (
    ChangeEmailInteractor,
    DeleteAccountInteractor,
    UpdateProfileInteractor,
)
from apps.accounts.application.profile.queries import GetCurrentUserQuery, GetUserQuery
from apps.accounts.application.token.services import TokenService
from apps.accounts.application.users.services import UserLookup, UsernameGenerator
from apps.accounts.domain.services.password_policy import PasswordPolicy
from apps.accounts.setup.config import Settings, get_settings

if TYPE_CHECKING:
    import redis.asyncio as aioredis
    from sqlalchemy.ext.asyncio import AsyncSession

    from apps.accounts.infrastructure.mail import SmtpMailer
    from apps.accounts.infrastructure.security import Argon2PasswordHasher, JoseTokenCodec


# ============================================================
# Infrastructure Dependencies
# ============================================================


async def get_db_session() -> AsyncGenerator["AsyncSession", None]:
    """DB 세션 제공자."""
    from apps.accounts.infrastructure.persistence_postgres.session import get_async_session

    async for session in get_async_session():
        yield session


def get_revocation_redis() -> "aioredis.Redis":
    """블랙리스트용 Redis 클라이언트 제공자."""
    from apps.accounts.infrastructure.persistence_redis.client import get_revocation_redis

    return get_revocation_redis()


# ============================================================
# Gateway Dependencies (Adapters)
# ============================================================


async def get_users_query_gateway(
    session: "AsyncSession" = Depends(get_db_session),
):
    """UsersQueryGateway 제공자."""
    from apps.accounts.infrastructure.persistence_postgres.adapters import SqlaUsersQueryGateway

    return SqlaUsersQueryGateway(session)


async def get_users_command_gateway(
    session: "AsyncSession" = Depends(get_db_session),
):
    """UsersCommandGateway 제공자."""
    from apps.accounts.infrastructure.persistence_postgres.adapters import (
        SqlaUsersCommandGateway,
    )

    return SqlaUsersCommandGateway(session)


async def get_transaction_manager(
    session: "AsyncSession" = Depends(get_db_session),
):
    """TransactionManager 제공자."""
    from apps.accounts.infrastructure.persistence_postgres.adapters import SqlaTransactionManager

    return SqlaTransactionManager(session)


def get_revocation_cache(
    redis: "aioredis.Redis" = Depends(get_revocation_redis),
):
    """RevocationCache 제공자."""
    from apps.accounts.infrastructure.persistence_redis.adapters import RedisRevocationCache

    return RedisRevocationCache(redis)


# ============================================================
# Singletons (키 로드, 해셔, 메일러)
# ============================================================


@lru_cache
def get_token_codec() -> "JoseTokenCodec":
    """TokenCodec 제공자 (싱글톤, RSA 키는 한 번만 로드)."""
    from apps.accounts.infrastructure.security import JoseTokenCodec

    settings = get_settings()
    return JoseTokenCodec(
        settings.token_configs(),
        issuer=settings.app_id,
        domain=settings.domain,
    )


@lru_cache
def get_password_hasher() -> "Argon2PasswordHasher":
    """PasswordHasher 제공자."""
    from apps.accounts.infrastructure.security import Argon2PasswordHasher

    return Argon2PasswordHasher()


@lru_cache
def get_mailer() -> "SmtpMailer":
    """Mailer 제공자 (발송 태스크 보관을 위해 싱글톤)."""
    from apps.accounts.infrastructure.mail import SmtpMailer

    settings = get_settings()
    return SmtpMailer(
        frontend_url=settings.frontend_url,
        smtp_host=settings.smtp_host,
        smtp_port=settings.smtp_port,
        smtp_user=settings.smtp_user,
        smtp_password=settings.smtp_password,
        smtp_use_tls=settings.smtp_use_tls,
        from_name=settings.mail_from_name,
        from_address=settings.mail_from_address,
    )


# ============================================================
# Service Dependencies (연주자)
# ============================================================


def get_token_service(
    codec=Depends(get_token_codec),
    revocation_cache=Depends(get_revocation_cache),
) -> TokenService:
    """TokenService 제공자."""
    return TokenService(codec, revocation_cache)


def get_password_policy(
    hasher=Depends(get_password_hasher),
    settings: Settings = Depends(get_settings),
) -> PasswordPolicy:
    """PasswordPolicy 제공자."""
    return PasswordPolicy(hasher, reuse_cooldown=settings.password_reuse_cooldown)


def get_user_lookup(users_query_gateway=Depends(get_users_query_gateway)) -> UserLookup:
    return UserLookup(users_query_gateway)


def get_username_generator(
    users_query_gateway=Depends(get_users_query_gateway),
) -> UsernameGenerator:
    return UsernameGenerator(users_query_gateway)


# ============================================================
# UseCase Dependencies (지휘자)
# ============================================================


def get_sign_up_interactor(
    password_policy: PasswordPolicy = Depends(get_password_policy),
    username_generator: UsernameGenerator = Depends(get_username_generator),
    token_service: TokenService = Depends(get_token_service),
    users_query_gateway=Depends(get_users_query_gateway),
    users_command_gateway=Depends(get_users_command_gateway),
    password_hasher=Depends(get_password_hasher),
    mailer=Depends(get_mailer),
    transaction_manager=Depends(get_transaction_manager),
) -> SignUpInteractor:
    """SignUpInteractor 제공자."""
    return SignUpInteractor(
        password_policy=password_policy,
        username_generator=username_generator,
        token_service=token_service,
        users_query_gateway=users_query_gateway,
        users_command_gateway=users_command_gateway,
        password_hasher=password_hasher,
        mailer=mailer,
        transaction_manager=transaction_manager,
    )


def get_sign_in_interactor(
    user_lookup: UserLookup = Depends(get_user_lookup),
    password_policy: PasswordPolicy = Depends(get_password_policy),
    token_service: TokenService = Depends(get_token_service),
    password_hasher=Depends(get_password_hasher),
    mailer=Depends(get_mailer),
) -> SignInInteractor:
    """SignInInteractor 제공자."""
    return SignInInteractor(
        user_lookup=user_lookup,
        password_policy=password_policy,
        token_service=token_service,
        password_hasher=password_hasher,
        mailer=mailer,
    )


def get_refresh_tokens_interactor(
    token_service: TokenService = Depends(get_token_service),
    users_query_gateway=Depends(get_users_query_gateway),
) -> RefreshTokensInteractor:
    """RefreshTokensInteractor 제공자."""
    return RefreshTokensInteractor(
        token_service=token_service,
        users_query_gateway=users_query_gateway,
    )


def get_logout_interactor(
    token_service: TokenService = Depends(get_token_service),
) -> LogoutInteractor:
    """LogoutInteractor 제공자."""
    return LogoutInteractor(token_service=token_service)


def get_confirm_email_interactor(
    token_service: TokenService = Depends(get_token_service),
    password_policy: PasswordPolicy = Depends(get_password_policy),
    users_query_gateway=Depends(get_users_query_gateway),
    users_command_gateway=Depends(get_users_command_gateway),
    transaction_manager=Depends(get_transaction_manager),
) -> ConfirmEmailInteractor:
    """ConfirmEmailInteractor 제공자."""
    return ConfirmEmailInteractor(
        token_service=token_service,
        password_policy=password_policy,
        users_query_gateway=users_query_gateway,
        users_command_gateway=users_command_gateway,
        transaction_manager=transaction_manager,
    )


def get_forgot_password_interactor(
    token_service: TokenService = Depends(get_token_service),
    users_query_gateway=Depends(get_users_query_gateway),
    mailer=Depends(get_mailer),
) -> ForgotPasswordInteractor:
    """ForgotPasswordInteractor 제공자."""
    return ForgotPasswordInteractor(
        token_service=token_service,
        users_query_gateway=users_query_gateway,
        mailer=mailer,
    )


def get_reset_password_interactor(
    password_policy: PasswordPolicy = Depends(get_password_policy),
    token_service: TokenService = Depends(get_token_service),
    users_query_gateway=Depends(get_users_query_gateway),
    users_command_gateway=Depends(get_users_command_gateway),
    transaction_manager=Depends(get_transaction_manager),
) -> ResetPasswordInteractor:
    """ResetPasswordInteractor 제공자."""
    return ResetPasswordInteractor(
        password_policy=password_policy,
        token_service=token_service,
        users_query_gateway=users_query_gateway,
        users_command_gateway=users_command_gateway,
        transaction_manager=transaction_manager,
    )


def get_change_password_interactor(
    password_policy: PasswordPolicy = Depends(get_password_policy),
    token_service: TokenService = Depends(get_token_service),
    users_query_gateway=Depends(get_users_query_gateway),
    users_command_gateway=Depends(get_users_command_gateway),
    transaction_manager=Depends(get_transaction_manager),
) -> ChangePasswordInteractor:
    """ChangePasswordInteractor 제공자."""
    return ChangePasswordInteractor(
        password_policy=password_policy,
        token_service=token_service,
        users_query_gateway=users_query_gateway,
        users_command_gateway=users_command_gateway,
        transaction_manager=transaction_manager,
    )


def get_user_query(users_query_gateway=Depends(get_users_query_gateway)) -> GetUserQuery:
    return GetUserQuery(users_query_gateway)


def get_current_user_query(
    users_query_gateway=Depends(get_users_query_gateway),
) -> GetCurrentUserQuery:
    return GetCurrentUserQuery(users_query_gateway)


def get_update_profile_interactor(
    users_query_gateway=Depends(get_users_query_gateway),
    users_command_gateway=Depends(get_users_command_gateway),
    transaction_manager=Depends(get_transaction_manager),
) -> UpdateProfileInteractor:
    """UpdateProfileInteractor 제공자."""
    return UpdateProfileInteractor(
        users_query_gateway=users_query_gateway,
        users_command_gateway=users_command_gateway,
        transaction_manager=transaction_manager,
    )


def get_change_email_interactor(
    password_policy: PasswordPolicy = Depends(get_password_policy),
    token_service: TokenService = Depends(get_token_service),
    users_query_gateway=Depends(get_users_query_gateway),
    users_command_gateway=Depends(get_users_command_gateway),
    transaction_manager=Depends(get_transaction_manager),
) -> ChangeEmailInteractor:
    """ChangeEmailInteractor 제공자."""
    return ChangeEmailInteractor(
        password_policy=password_policy,
        token_service=token_service,
        users_query_gateway=users_query_gateway,
        users_command_gateway=users_command_gateway,
        transaction_manager=transaction_manager,
    )


def get_delete_account_interactor(
    password_policy: PasswordPolicy = Depends(get_password_policy),
    users_query_gateway=Depends(get_users_query_gateway),
    users_command_gateway=Depends(get_users_command_gateway),
    transaction_manager=Depends(get_transaction_manager),
) -> DeleteAccountInteractor:
    """DeleteAccountInteractor 제공자."""
    return DeleteAccountInteractor(
        password_policy=password_policy,
        users_query_gateway=users_query_gateway,
        users_command_gateway=users_command_gateway,
        transaction_manager=transaction_manager,
    )
