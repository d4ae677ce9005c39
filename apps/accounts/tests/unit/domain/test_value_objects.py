"""Value Objects 단위 테스트."""

import uuid

import pytest

from apps.accounts.domain.enums.token_type import TokenType
from apps.accounts.domain.exceptions.auth import InvalidTokenError
from apps.accounts.domain.exceptions.validation import InvalidEmailError
from apps.accounts.domain.value_objects.credentials import Credentials
from apps.accounts.domain.value_objects.email import Email
from apps.accounts.domain.value_objects.token_payload import TokenPayload
from apps.accounts.domain.value_objects.user_id import UserId


class TestUserId:
    """UserId 테스트."""

    def test_generate_unique(self) -> None:
        assert UserId.generate() != UserId.generate()

    def test_from_string(self) -> None:
        raw = uuid.uuid4()
        assert UserId.from_string(str(raw)).value == raw

    @pytest.mark.parametrize("raw", ["", "not-a-uuid", "1234"])
    def test_from_string_invalid(self, raw: str) -> None:
        with pytest.raises(InvalidTokenError):
            UserId.from_string(raw)

    def test_str(self) -> None:
        raw = uuid.uuid4()
        assert str(UserId(value=raw)) == str(raw)


class TestEmail:
    """Email 테스트."""

    def test_normalize(self) -> None:
        email = Email.normalize("  John.Doe@Example.COM ")
        assert email.value == "john.doe@example.com"

    @pytest.mark.parametrize("raw", ["", "plain", "a@b", "no-at-sign.com"])
    def test_invalid(self, raw: str) -> None:
        with pytest.raises(InvalidEmailError):
            Email.normalize(raw)

    def test_masked(self) -> None:
        email = Email.normalize("johndoe@example.com")
        assert email.masked == "jo***@example.com"
        assert "johndoe" not in repr(email)

    def test_domain(self) -> None:
        assert Email.normalize("a.b@example.com").domain == "example.com"

    def test_equality(self) -> None:
        assert Email.normalize("A@example.com") == Email.normalize("a@example.com")


class TestCredentials:
    """Credentials 테스트."""

    def test_initial(self) -> None:
        credentials = Credentials.initial(1000)
        assert credentials.version == 0
        assert credentials.last_password == ""
        assert credentials.password_updated_at == 1000
        assert not credentials.has_last_password

    def test_bumped_keeps_password_fields(self) -> None:
        credentials = Credentials(version=3, last_password="old", password_updated_at=10)

        bumped = credentials.bumped(2000)

        assert bumped.version == 4
        assert bumped.updated_at == 2000
        assert bumped.last_password == "old"
        assert bumped.password_updated_at == 10
        # 원본은 불변
        assert credentials.version == 3

    def test_with_password_change(self) -> None:
        credentials = Credentials.initial(1000)

        changed = credentials.with_password_change("previous-hash", 5000)

        assert changed.version == 1
        assert changed.last_password == "previous-hash"
        assert changed.password_updated_at == 5000
        assert changed.has_last_password


class TestTokenPayload:
    """TokenPayload 테스트."""

    def test_remaining_seconds(self) -> None:
        payload = TokenPayload(
            user_id=UserId.generate(),
            token_type=TokenType.REFRESH,
            subject="john@example.com",
            audience="localhost",
            iat=1000,
            exp=1600,
            version=0,
            token_id="tid",
        )

        assert payload.remaining_seconds(1100) == 500
        assert payload.remaining_seconds(1700) <= 0


class TestTokenType:
    def test_only_access_is_not_version_bound(self) -> None:
        assert not TokenType.ACCESS.is_version_bound
        assert TokenType.REFRESH.is_version_bound
        assert TokenType.CONFIRMATION.is_version_bound
        assert TokenType.RESET_PASSWORD.is_version_bound
