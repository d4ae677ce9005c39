"""Profile DTOs."""

from apps.accounts.application.profile.dto.profile import (
    ChangeEmailRequest,
    DeleteAccountRequest,
    UpdateProfileRequest,
)

__all__ = ["UpdateProfileRequest", "ChangeEmailRequest", "DeleteAccountRequest"]
