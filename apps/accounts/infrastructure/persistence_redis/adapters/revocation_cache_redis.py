"""Redis Revocation Cache.

RevocationCache 포트의 구현체입니다.
항목은 밀리초 TTL(PX)로 저장되어 토큰 만료와 함께 사라집니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from redis.exceptions import RedisError

from apps.accounts.application.common.exceptions import CacheError

if TYPE_CHECKING:
    import redis.asyncio as aioredis

logger = logging.getLogger(__name__)


class RedisRevocationCache:
    """Redis 기반 폐기 캐시.

    RevocationCache 구현체.
    """

    def __init__(self, redis: "aioredis.Redis") -> None:
        self._redis = redis

    async def set(self, key: str, value: str, ttl_millis: int) -> None:
        if ttl_millis <= 0:
            return
        try:
            await self._redis.set(key, value, px=ttl_millis)
        except RedisError as e:
            logger.exception("Revocation cache write failed")
            raise CacheError() from e

    async def get(self, key: str) -> str | None:
        try:
            return await self._redis.get(key)
        except RedisError as e:
            logger.exception("Revocation cache read failed")
            raise CacheError() from e
