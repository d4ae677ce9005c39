"""Application Exceptions.

공통 예외만 포함합니다. 도메인 예외는 apps.accounts.domain.exceptions에서 import하세요.
"""

from apps.accounts.application.common.exceptions.base import ApplicationError
from apps.accounts.application.common.exceptions.gateway import (
    CacheError,
    DataMapperError,
    GatewayError,
    TokenSigningError,
)

__all__ = [
    "ApplicationError",
    "GatewayError",
    "DataMapperError",
    "CacheError",
    "TokenSigningError",
]
