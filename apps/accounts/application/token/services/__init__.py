"""Token Services."""

from apps.accounts.application.token.services.token_service import (
    BLACKLIST_KEY_PREFIX,
    TokenService,
    blacklist_key,
)

__all__ = ["TokenService", "blacklist_key", "BLACKLIST_KEY_PREFIX"]
