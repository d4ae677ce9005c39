"""Token DTOs."""

from apps.accounts.application.token.dto.token import AuthTokens

__all__ = ["AuthTokens"]
