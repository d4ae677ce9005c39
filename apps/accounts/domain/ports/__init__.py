"""Domain Ports."""

from apps.accounts.domain.ports.password_hasher import PasswordHasher

__all__ = ["PasswordHasher"]
