"""Security adapters (token codec, keys, password hashing)."""

from apps.accounts.infrastructure.security.argon2_password_hasher import Argon2PasswordHasher
from apps.accounts.infrastructure.security.jose_token_codec import JoseTokenCodec
from apps.accounts.infrastructure.security.key_manager import KeyManager
from apps.accounts.infrastructure.security.token_config import TokenConfig

__all__ = ["Argon2PasswordHasher", "JoseTokenCodec", "KeyManager", "TokenConfig"]
