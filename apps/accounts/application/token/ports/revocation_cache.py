"""RevocationCache Port.

TTL을 지원하는 key/value 저장소입니다. 블랙리스트 조회는 리프레시 때마다 일어나므로
키가 없는 경우가 가장 흔하고 빨라야 합니다.
"""

from typing import Protocol


class RevocationCache(Protocol):
    """폐기 캐시 인터페이스.

    구현체:
        - RedisRevocationCache (infrastructure/persistence_redis/)
    """

    async def set(self, key: str, value: str, ttl_millis: int) -> None:
        """키를 TTL과 함께 저장.

        Args:
            key: 캐시 키
            value: 저장 값
            ttl_millis: 만료까지 남은 시간 (밀리초)
        """
        ...

    async def get(self, key: str) -> str | None:
        """키 조회. 없거나 만료되었으면 None."""
        ...
