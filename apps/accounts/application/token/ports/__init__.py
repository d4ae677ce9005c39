"""Token Ports."""

from apps.accounts.application.token.ports.revocation_cache import RevocationCache
from apps.accounts.application.token.ports.token_codec import MintedToken, TokenCodec

__all__ = ["MintedToken", "TokenCodec", "RevocationCache"]
