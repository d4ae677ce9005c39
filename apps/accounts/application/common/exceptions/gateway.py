"""Gateway Exceptions.

저장소/캐시/서명 백엔드 장애입니다. 로컬에서 복구할 수 없으며
클라이언트에는 내부 오류로만 노출됩니다.
"""

from __future__ import annotations

from apps.accounts.application.common.exceptions.base import ApplicationError


class GatewayError(ApplicationError):
    """외부 백엔드 장애."""

    code = "INTERNAL_ERROR"

    def __init__(self, message: str = "Gateway error occurred") -> None:
        super().__init__(message)


class DataMapperError(GatewayError):
    """사용자 저장소 오류."""

    def __init__(self, message: str = "User store error") -> None:
        super().__init__(message)


class CacheError(GatewayError):
    """폐기 캐시 오류."""

    def __init__(self, message: str = "Revocation cache error") -> None:
        super().__init__(message)


class TokenSigningError(GatewayError):
    """토큰 서명 실패."""

    def __init__(self, message: str = "Token signing failed") -> None:
        super().__init__(message)
