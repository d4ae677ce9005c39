"""Argon2PasswordHasher 단위 테스트."""

import pytest

from apps.accounts.infrastructure.security import Argon2PasswordHasher


class TestArgon2PasswordHasher:
    """Argon2PasswordHasher 테스트."""

    @pytest.mark.asyncio
    async def test_hash_and_verify(self, argon2_hasher: Argon2PasswordHasher) -> None:
        password_hash = await argon2_hasher.hash("Abcdef1!")

        assert password_hash.startswith("$argon2id$")
        assert await argon2_hasher.verify(password_hash, "Abcdef1!") is True
        assert await argon2_hasher.verify(password_hash, "Abcdef2!") is False

    @pytest.mark.asyncio
    async def test_salted(self, argon2_hasher: Argon2PasswordHasher) -> None:
        assert await argon2_hasher.hash("Abcdef1!") != await argon2_hasher.hash("Abcdef1!")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("stored", ["", "not-a-hash", "$argon2id$broken"])
    async def test_bad_stored_hash(self, argon2_hasher: Argon2PasswordHasher, stored: str) -> None:
        assert await argon2_hasher.verify(stored, "Abcdef1!") is False
