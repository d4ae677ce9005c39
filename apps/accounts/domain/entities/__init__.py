"""Domain Entities."""

from apps.accounts.domain.entities.user import User

__all__ = ["User"]
