"""세션 수명주기 시나리오 테스트.

메모리 저장소/캐시/메일러와 실제 JoseTokenCodec, argon2 해셔를 조합해
여러 Use Case에 걸친 동작을 확인합니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

import pytest

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
from apps.accounts.application.auth.dto import (
    AuthResult,
    ChangePasswordRequest,
    ConfirmEmailRequest,
    ForgotPasswordRequest,
    LogoutRequest,
    RefreshTokensRequest,
    ResetPasswordRequest,
    SignInRequest,
    SignUpRequest,
)
from apps.accounts.application.profile.commands import ChangeEmailInteractor, UpdateProfileInteractor
from apps.accounts.application.profile.dto import ChangeEmailRequest, UpdateProfileRequest
from apps.accounts.application.token.services import TokenService
from apps.accounts.application.users.services import UserLookup, UsernameGenerator
from apps.accounts.domain.enums.token_type import TokenType
from apps.accounts.domain.exceptions.auth import (
    AuthenticationError,
    EmailNotConfirmedError,
    InvalidTokenError,
    RecentPasswordChangeError,
    StaleCredentialsError,
    TokenRevokedError,
)
from apps.accounts.domain.exceptions.user import EmailAlreadyInUseError
from apps.accounts.domain.exceptions.validation import PasswordMismatchError, PasswordReuseError
from apps.accounts.domain.services.password_policy import PasswordPolicy
from apps.accounts.infrastructure.security import Argon2PasswordHasher, JoseTokenCodec
from apps.accounts.tests.unit.fakes import (
    FakeClock,
    InMemoryRevocationCache,
    InMemoryUsersStore,
    NoopTransactionManager,
    RecordingMailer,
)

PASSWORD = "Abcdef1!"
NEW_PASSWORD = "Ghijkl2@"
EMAIL = "john@example.com"


@dataclass
class Accounts:
    """시나리오용 Use Case 묶음."""

    sign_up: SignUpInteractor
    sign_in: SignInInteractor
    refresh: RefreshTokensInteractor
    logout: LogoutInteractor
    confirm_email: ConfirmEmailInteractor
    forgot_password: ForgotPasswordInteractor
    reset_password: ResetPasswordInteractor
    change_password: ChangePasswordInteractor
    change_email: ChangeEmailInteractor
    token_service: TokenService


@pytest.fixture
def accounts(
    codec: JoseTokenCodec,
    clock: FakeClock,
    argon2_hasher: Argon2PasswordHasher,
    users_store: InMemoryUsersStore,
    revocation_cache: InMemoryRevocationCache,
    mailer: RecordingMailer,
    transaction_manager: NoopTransactionManager,
) -> Accounts:
    token_service = TokenService(codec, revocation_cache, clock=clock)
    policy = PasswordPolicy(argon2_hasher, reuse_cooldown=timedelta(days=30), clock=clock)
    common = dict(
        users_query_gateway=users_store,
        users_command_gateway=users_store,
        transaction_manager=transaction_manager,
    )
    return Accounts(
        sign_up=SignUpInteractor(
            password_policy=policy,
            username_generator=UsernameGenerator(users_store),
            token_service=token_service,
            password_hasher=argon2_hasher,
            mailer=mailer,
            **common,
        ),
        sign_in=SignInInteractor(
            user_lookup=UserLookup(users_store),
            password_policy=policy,
            token_service=token_service,
            password_hasher=argon2_hasher,
            mailer=mailer,
        ),
        refresh=RefreshTokensInteractor(token_service=token_service, users_query_gateway=users_store),
        logout=LogoutInteractor(token_service),
        confirm_email=ConfirmEmailInteractor(
            token_service=token_service, password_policy=policy, **common
        ),
        forgot_password=ForgotPasswordInteractor(
            token_service=token_service, users_query_gateway=users_store, mailer=mailer
        ),
        reset_password=ResetPasswordInteractor(
            password_policy=policy, token_service=token_service, **common
        ),
        change_password=ChangePasswordInteractor(
            password_policy=policy, token_service=token_service, **common
        ),
        change_email=ChangeEmailInteractor(
            password_policy=policy, token_service=token_service, **common
        ),
        token_service=token_service,
    )


async def _register(accounts: Accounts, mailer: RecordingMailer) -> AuthResult:
    """가입 후 인증 메일의 토큰으로 인증까지 완료."""
    await accounts.sign_up.execute(
        SignUpRequest(name="John Doe", email=EMAIL, password1=PASSWORD, password2=PASSWORD)
    )
    _, token = mailer.confirmations[-1]
    return await accounts.confirm_email.execute(ConfirmEmailRequest(confirmation_token=token))


class TestSessionLifecycle:
    """로그인, 갱신, 로그아웃, 비밀번호 변경 흐름."""

    @pytest.mark.asyncio
    async def test_refresh_keeps_lineage_and_password_change_revokes(
        self, accounts: Accounts, mailer: RecordingMailer, clock: FakeClock
    ) -> None:
        await _register(accounts, mailer)

        signed_in = await accounts.sign_in.execute(
            SignInRequest(email_or_username=EMAIL, password=PASSWORD)
        )
        clock.advance(1)
        refreshed = await accounts.refresh.execute(
            RefreshTokensRequest(refresh_token=signed_in.tokens.refresh_token)
        )

        # 같은 계보, 다른 토큰
        assert refreshed.tokens.token_id == signed_in.tokens.token_id
        assert refreshed.tokens.refresh_token != signed_in.tokens.refresh_token
        assert refreshed.tokens.access_token != signed_in.tokens.access_token

        changed = await accounts.change_password.execute(
            ChangePasswordRequest(
                user_id=signed_in.user.id_,
                password=PASSWORD,
                password1=NEW_PASSWORD,
                password2=NEW_PASSWORD,
            )
        )
        assert changed.tokens.token_id != signed_in.tokens.token_id

        # 이전 버전의 리프레시 토큰은 모두 거부
        for old in (signed_in.tokens.refresh_token, refreshed.tokens.refresh_token):
            with pytest.raises(StaleCredentialsError):
                await accounts.refresh.execute(RefreshTokensRequest(refresh_token=old))

        # 새 세션은 갱신 가능
        await accounts.refresh.execute(
            RefreshTokensRequest(refresh_token=changed.tokens.refresh_token)
        )

    @pytest.mark.asyncio
    async def test_logout_is_idempotent_and_blocks_refresh(
        self, accounts: Accounts, mailer: RecordingMailer
    ) -> None:
        await _register(accounts, mailer)
        session = await accounts.sign_in.execute(
            SignInRequest(email_or_username="john.doe", password=PASSWORD)
        )
        refresh_token = session.tokens.refresh_token

        first = await accounts.logout.execute(LogoutRequest(refresh_token))
        second = await accounts.logout.execute(LogoutRequest(refresh_token))

        assert first.message == second.message == "Logout successful"
        with pytest.raises(TokenRevokedError):
            await accounts.refresh.execute(RefreshTokensRequest(refresh_token=refresh_token))

    @pytest.mark.asyncio
    async def test_logout_only_revokes_own_lineage(
        self, accounts: Accounts, mailer: RecordingMailer
    ) -> None:
        await _register(accounts, mailer)
        request = SignInRequest(email_or_username=EMAIL, password=PASSWORD)
        laptop = await accounts.sign_in.execute(request)
        phone = await accounts.sign_in.execute(request)

        await accounts.logout.execute(LogoutRequest(laptop.tokens.refresh_token))

        await accounts.refresh.execute(RefreshTokensRequest(refresh_token=phone.tokens.refresh_token))

    @pytest.mark.asyncio
    async def test_expired_refresh_token(
        self, accounts: Accounts, mailer: RecordingMailer, clock: FakeClock
    ) -> None:
        session = await _register(accounts, mailer)

        clock.advance(7 * 24 * 3600 + 10)

        with pytest.raises(InvalidTokenError):
            await accounts.refresh.execute(
                RefreshTokensRequest(refresh_token=session.tokens.refresh_token)
            )

    @pytest.mark.asyncio
    async def test_previous_password_sign_in_message(
        self, accounts: Accounts, mailer: RecordingMailer
    ) -> None:
        session = await _register(accounts, mailer)
        await accounts.change_password.execute(
            ChangePasswordRequest(
                user_id=session.user.id_,
                password=PASSWORD,
                password1=NEW_PASSWORD,
                password2=NEW_PASSWORD,
            )
        )

        with pytest.raises(RecentPasswordChangeError) as exc_info:
            await accounts.sign_in.execute(SignInRequest(email_or_username=EMAIL, password=PASSWORD))

        assert exc_info.value.message == "You changed your password recently"
        assert isinstance(exc_info.value, AuthenticationError)


class TestRegistration:
    """가입과 이메일 인증 흐름."""

    @pytest.mark.asyncio
    async def test_duplicate_sign_up_conflicts(
        self, accounts: Accounts, users_store: InMemoryUsersStore
    ) -> None:
        request = SignUpRequest(name="John", email=EMAIL, password1=PASSWORD, password2=PASSWORD)
        await accounts.sign_up.execute(request)

        with pytest.raises(EmailAlreadyInUseError):
            await accounts.sign_up.execute(
                SignUpRequest(
                    name="Other", email="JOHN@example.com", password1=PASSWORD, password2=PASSWORD
                )
            )

        assert len(users_store.users) == 1

    @pytest.mark.asyncio
    async def test_mismatch_leaves_store_untouched(
        self, accounts: Accounts, users_store: InMemoryUsersStore, mailer: RecordingMailer
    ) -> None:
        with pytest.raises(PasswordMismatchError):
            await accounts.sign_up.execute(
                SignUpRequest(name="John", email=EMAIL, password1=PASSWORD, password2=NEW_PASSWORD)
            )

        assert users_store.users == {}
        assert mailer.confirmations == []

    @pytest.mark.asyncio
    async def test_same_name_gets_distinct_usernames(
        self, accounts: Accounts, users_store: InMemoryUsersStore
    ) -> None:
        for email in ("a@example.com", "b@example.com", "c@example.com"):
            await accounts.sign_up.execute(
                SignUpRequest(name="John Doe", email=email, password1=PASSWORD, password2=PASSWORD)
            )

        usernames = {user.username for user in users_store.users.values()}
        assert usernames == {"john.doe", "john.doe1", "john.doe2"}

    @pytest.mark.asyncio
    async def test_confirmation_token_is_single_use(
        self, accounts: Accounts, mailer: RecordingMailer
    ) -> None:
        await accounts.sign_up.execute(
            SignUpRequest(name="John", email=EMAIL, password1=PASSWORD, password2=PASSWORD)
        )
        _, token = mailer.confirmations[-1]

        result = await accounts.confirm_email.execute(ConfirmEmailRequest(confirmation_token=token))
        assert result.user.confirmed is True

        with pytest.raises(StaleCredentialsError):
            await accounts.confirm_email.execute(ConfirmEmailRequest(confirmation_token=token))

    @pytest.mark.asyncio
    async def test_unconfirmed_sign_in_resends_without_tokens(
        self, accounts: Accounts, mailer: RecordingMailer
    ) -> None:
        await accounts.sign_up.execute(
            SignUpRequest(name="John", email=EMAIL, password1=PASSWORD, password2=PASSWORD)
        )

        with pytest.raises(EmailNotConfirmedError):
            await accounts.sign_in.execute(SignInRequest(email_or_username=EMAIL, password=PASSWORD))

        assert len(mailer.confirmations) == 2

        # 재발송된 토큰으로도 인증 가능
        _, token = mailer.confirmations[-1]
        await accounts.confirm_email.execute(ConfirmEmailRequest(confirmation_token=token))


class TestPasswordRecovery:
    """비밀번호 찾기/재설정 흐름."""

    @pytest.mark.asyncio
    async def test_forgot_password_does_not_leak_accounts(
        self, accounts: Accounts, mailer: RecordingMailer
    ) -> None:
        await _register(accounts, mailer)

        known = await accounts.forgot_password.execute(ForgotPasswordRequest(email=EMAIL))
        unknown = await accounts.forgot_password.execute(
            ForgotPasswordRequest(email="nobody@example.com")
        )

        assert known.message == unknown.message
        assert [email for email, _ in mailer.resets] == [EMAIL]

    @pytest.mark.asyncio
    async def test_reset_token_is_single_use_and_revokes_sessions(
        self, accounts: Accounts, mailer: RecordingMailer
    ) -> None:
        session = await _register(accounts, mailer)
        await accounts.forgot_password.execute(ForgotPasswordRequest(email=EMAIL))
        _, reset_token = mailer.resets[-1]
        request = ResetPasswordRequest(
            reset_token=reset_token, password1=NEW_PASSWORD, password2=NEW_PASSWORD
        )

        await accounts.reset_password.execute(request)

        with pytest.raises(StaleCredentialsError):
            await accounts.reset_password.execute(request)
        with pytest.raises(StaleCredentialsError):
            await accounts.refresh.execute(
                RefreshTokensRequest(refresh_token=session.tokens.refresh_token)
            )
        await accounts.sign_in.execute(SignInRequest(email_or_username=EMAIL, password=NEW_PASSWORD))

    @pytest.mark.asyncio
    async def test_reset_blocks_recent_previous_password(
        self, accounts: Accounts, mailer: RecordingMailer
    ) -> None:
        session = await _register(accounts, mailer)
        await accounts.change_password.execute(
            ChangePasswordRequest(
                user_id=session.user.id_,
                password=PASSWORD,
                password1=NEW_PASSWORD,
                password2=NEW_PASSWORD,
            )
        )
        await accounts.forgot_password.execute(ForgotPasswordRequest(email=EMAIL))
        _, reset_token = mailer.resets[-1]

        with pytest.raises(PasswordReuseError):
            await accounts.reset_password.execute(
                ResetPasswordRequest(reset_token=reset_token, password1=PASSWORD, password2=PASSWORD)
            )

    @pytest.mark.asyncio
    async def test_reset_token_is_not_a_confirmation_token(
        self, accounts: Accounts, mailer: RecordingMailer
    ) -> None:
        await accounts.sign_up.execute(
            SignUpRequest(name="John", email=EMAIL, password1=PASSWORD, password2=PASSWORD)
        )
        await accounts.forgot_password.execute(ForgotPasswordRequest(email=EMAIL))
        _, reset_token = mailer.resets[-1]

        with pytest.raises(InvalidTokenError):
            await accounts.confirm_email.execute(ConfirmEmailRequest(confirmation_token=reset_token))


class TestEmailChange:
    @pytest.mark.asyncio
    async def test_change_email_revokes_previous_tokens(
        self, accounts: Accounts, mailer: RecordingMailer
    ) -> None:
        session = await _register(accounts, mailer)
        await accounts.forgot_password.execute(ForgotPasswordRequest(email=EMAIL))
        _, reset_token = mailer.resets[-1]

        changed = await accounts.change_email.execute(
            ChangeEmailRequest(user_id=session.user.id_, email="new@example.com", password=PASSWORD)
        )

        assert changed.user.email == "new@example.com"
        payload = accounts.token_service.decode_and_validate(
            changed.tokens.access_token, TokenType.ACCESS
        )
        assert payload.subject == "new@example.com"
        with pytest.raises(StaleCredentialsError):
            await accounts.refresh.execute(
                RefreshTokensRequest(refresh_token=session.tokens.refresh_token)
            )
        with pytest.raises(StaleCredentialsError):
            await accounts.reset_password.execute(
                ResetPasswordRequest(
                    reset_token=reset_token, password1=NEW_PASSWORD, password2=NEW_PASSWORD
                )
            )


class TestConcurrentWrites:
    """조회와 저장 사이에 다른 쓰기가 끼어드는 경우."""

    @pytest.mark.asyncio
    async def test_profile_update_cannot_roll_back_password_change(
        self,
        accounts: Accounts,
        mailer: RecordingMailer,
        users_store: InMemoryUsersStore,
        transaction_manager: NoopTransactionManager,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        session = await _register(accounts, mailer)
        user_id = session.user.id_
        read_user = users_store.get_by_id

        async def read_then_change_password(requested_id):
            user = await read_user(requested_id)
            monkeypatch.setattr(users_store, "get_by_id", read_user)
            await accounts.change_password.execute(
                ChangePasswordRequest(
                    user_id=user_id,
                    password=PASSWORD,
                    password1=NEW_PASSWORD,
                    password2=NEW_PASSWORD,
                )
            )
            return user

        monkeypatch.setattr(users_store, "get_by_id", read_then_change_password)
        update_profile = UpdateProfileInteractor(users_store, users_store, transaction_manager)

        with pytest.raises(StaleCredentialsError):
            await update_profile.execute(UpdateProfileRequest(user_id=user_id, name="Jane Doe"))

        stored = users_store.users[user_id]
        assert stored.version == session.user.version + 1
        assert stored.name == "John Doe"

        # 비밀번호 변경 이전 세션은 계속 거부
        with pytest.raises(StaleCredentialsError):
            await accounts.refresh.execute(
                RefreshTokensRequest(refresh_token=session.tokens.refresh_token)
            )
        signed_in = await accounts.sign_in.execute(
            SignInRequest(email_or_username=EMAIL, password=NEW_PASSWORD)
        )
        assert signed_in.user.version == stored.version
