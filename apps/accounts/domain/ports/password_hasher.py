"""PasswordHasher Port.

단방향 해시 + 검증 함수입니다. 알고리즘 자체는 인프라 계층이 결정합니다.
"""

from typing import Protocol


class PasswordHasher(Protocol):
    """비밀번호 해셔 인터페이스.

    구현체:
        - Argon2PasswordHasher (infrastructure/security/)
    """

    async def hash(self, password: str) -> str:
        """평문 비밀번호를 해시합니다."""
        ...

    async def verify(self, password_hash: str, password: str) -> bool:
        """해시와 평문이 일치하는지 확인합니다.

        해시 형식이 잘못된 경우에도 예외 없이 False를 반환합니다.
        """
        ...
