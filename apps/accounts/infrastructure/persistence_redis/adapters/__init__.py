"""Redis adapters."""

from apps.accounts.infrastructure.persistence_redis.adapters.revocation_cache_redis import (
    RedisRevocationCache,
)

__all__ = ["RedisRevocationCache"]
