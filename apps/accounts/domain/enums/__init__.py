"""Domain Enums."""

from apps.accounts.domain.enums.token_type import TokenType

__all__ = ["TokenType"]
