"""Common DTOs."""

from apps.accounts.application.common.dto.message import Message

__all__ = ["Message"]
