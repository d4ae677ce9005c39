"""Users 서비스(이름 정리, 사용자명 생성, 식별자 조회) 단위 테스트."""

from unittest.mock import MagicMock

import pytest

from apps.accounts.application.users.services import (
    UserLookup,
    UsernameGenerator,
    format_name,
    is_valid_username,
    point_slug,
)
from apps.accounts.domain.exceptions.validation import InvalidEmailError, InvalidIdentifierError
from apps.accounts.tests.unit.factories import create_user
from apps.accounts.tests.unit.fakes import InMemoryUsersStore


class TestNaming:
    """이름/slug 헬퍼 테스트."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("  john   doe ", "John Doe"),
            ("mary-jane o'neil", "Mary-jane O'neil"),
            ("ALICE", "ALICE"),
        ],
    )
    def test_format_name(self, raw: str, expected: str) -> None:
        assert format_name(raw) == expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("John Doe", "john.doe"),
            ("José  Álvarez", "jose.alvarez"),
            ("Mary-Jane O'Neil", "maryjane.oneil"),
            ("!!!", ""),
        ],
    )
    def test_point_slug(self, raw: str, expected: str) -> None:
        assert point_slug(raw) == expected

    @pytest.mark.parametrize(
        ("value", "valid"),
        [
            ("john.doe", True),
            ("john_doe-2", True),
            ("jd", False),
            ("john..doe", False),
            (".john", False),
            ("John", False),
            ("a" * 107, False),
        ],
    )
    def test_is_valid_username(self, value: str, valid: bool) -> None:
        assert is_valid_username(value) is valid


class TestUsernameGenerator:
    """UsernameGenerator 테스트."""

    @pytest.fixture
    def store(self) -> InMemoryUsersStore:
        return InMemoryUsersStore()

    @pytest.mark.asyncio
    async def test_free_slug(self, store: InMemoryUsersStore) -> None:
        assert await UsernameGenerator(store).generate("John Doe") == "john.doe"

    @pytest.mark.asyncio
    async def test_taken_slug_gets_count_suffix(self, store: InMemoryUsersStore) -> None:
        await store.add(create_user(username="john.doe"))

        assert await UsernameGenerator(store).generate("John Doe") == "john.doe1"

    @pytest.mark.asyncio
    async def test_suffix_skips_used_numbers(self, store: InMemoryUsersStore) -> None:
        await store.add(create_user(username="john.doe", email="a@example.com"))
        await store.add(create_user(username="john.doe2", email="b@example.com"))

        assert await UsernameGenerator(store).generate("John Doe") == "john.doe3"

    @pytest.mark.asyncio
    async def test_fallback_slug(self, store: InMemoryUsersStore) -> None:
        assert await UsernameGenerator(store).generate("!!!") == "user"


class TestUserLookup:
    """UserLookup 테스트."""

    @pytest.mark.asyncio
    async def test_email_is_normalized(self, mock_users_query_gateway: MagicMock) -> None:
        user = create_user()
        mock_users_query_gateway.get_by_email.return_value = user

        result = await UserLookup(mock_users_query_gateway).by_email_or_username(
            " John@Example.com "
        )

        assert result is user
        mock_users_query_gateway.get_by_email.assert_awaited_once_with("john@example.com")
        mock_users_query_gateway.get_by_username.assert_not_called()

    @pytest.mark.asyncio
    async def test_username_is_lowercased(self, mock_users_query_gateway: MagicMock) -> None:
        mock_users_query_gateway.get_by_username.return_value = None

        result = await UserLookup(mock_users_query_gateway).by_email_or_username("John.Doe")

        assert result is None
        mock_users_query_gateway.get_by_username.assert_awaited_once_with("john.doe")

    @pytest.mark.asyncio
    async def test_invalid_username(self, mock_users_query_gateway: MagicMock) -> None:
        with pytest.raises(InvalidIdentifierError):
            await UserLookup(mock_users_query_gateway).by_email_or_username("no spaces!")

    @pytest.mark.asyncio
    async def test_invalid_email(self, mock_users_query_gateway: MagicMock) -> None:
        with pytest.raises(InvalidEmailError):
            await UserLookup(mock_users_query_gateway).by_email_or_username("bad@")
