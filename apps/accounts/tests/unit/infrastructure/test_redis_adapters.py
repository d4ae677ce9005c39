"""Redis Adapters 단위 테스트.

Redis 클라이언트를 Mock하여 어댑터 로직을 테스트합니다.
"""

from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from apps.accounts.application.common.exceptions import CacheError
from apps.accounts.infrastructure.persistence_redis.adapters.revocation_cache_redis import (
    RedisRevocationCache,
)


class TestRedisRevocationCache:
    """RedisRevocationCache 테스트."""

    @pytest.fixture
    def mock_redis(self) -> AsyncMock:
        return AsyncMock()

    @pytest.fixture
    def cache(self, mock_redis: AsyncMock) -> RedisRevocationCache:
        return RedisRevocationCache(redis=mock_redis)

    @pytest.mark.asyncio
    async def test_set_with_millisecond_ttl(
        self, cache: RedisRevocationCache, mock_redis: AsyncMock
    ) -> None:
        # Act
        await cache.set("blacklist:u1:t1", "1700000000", 5000)

        # Assert
        mock_redis.set.assert_awaited_once_with("blacklist:u1:t1", "1700000000", px=5000)

    @pytest.mark.asyncio
    async def test_set_skips_non_positive_ttl(
        self, cache: RedisRevocationCache, mock_redis: AsyncMock
    ) -> None:
        await cache.set("blacklist:u1:t1", "x", 0)

        mock_redis.set.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_hit_and_miss(
        self, cache: RedisRevocationCache, mock_redis: AsyncMock
    ) -> None:
        mock_redis.get.return_value = "1700000000"
        assert await cache.get("blacklist:u1:t1") == "1700000000"

        mock_redis.get.return_value = None
        assert await cache.get("blacklist:u1:t2") is None

    @pytest.mark.asyncio
    async def test_errors_become_cache_error(
        self, cache: RedisRevocationCache, mock_redis: AsyncMock
    ) -> None:
        mock_redis.get.side_effect = RedisConnectionError("down")
        mock_redis.set.side_effect = RedisConnectionError("down")

        with pytest.raises(CacheError) as exc_info:
            await cache.get("blacklist:u1:t1")
        assert exc_info.value.code == "INTERNAL_ERROR"

        with pytest.raises(CacheError):
            await cache.set("blacklist:u1:t1", "x", 1000)
