"""Base domain exceptions."""

from __future__ import annotations


class DomainError(Exception):
    """도메인 계층 기본 예외.

    Attributes:
        message: 클라이언트에 노출해도 되는 메시지
        code: 기계 판독용 에러 카테고리
    """

    code: str = "DOMAIN_ERROR"

    def __init__(self, message: str = "Domain error occurred") -> None:
        self.message = message
        super().__init__(message)
