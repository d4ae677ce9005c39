"""Domain Value Objects."""

from apps.accounts.domain.value_objects.credentials import Credentials
from apps.accounts.domain.value_objects.email import Email
from apps.accounts.domain.value_objects.token_payload import TokenPayload
from apps.accounts.domain.value_objects.user_id import UserId

__all__ = ["UserId", "Email", "Credentials", "TokenPayload"]
