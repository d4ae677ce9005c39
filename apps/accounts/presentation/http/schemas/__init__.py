"""HTTP Schemas."""

from apps.accounts.presentation.http.schemas.auth import (
    AuthResponse,
    AuthResponseUser,
    ChangePasswordBody,
    ConfirmEmailBody,
    EmailBody,
    ResetPasswordBody,
    SignInBody,
    SignUpBody,
)
from apps.accounts.presentation.http.schemas.common import MessageResponse
from apps.accounts.presentation.http.schemas.users import (
    ChangeEmailBody,
    PasswordBody,
    ResponseUser,
    UpdateUserBody,
)

__all__ = [
    "MessageResponse",
    "SignUpBody",
    "SignInBody",
    "ConfirmEmailBody",
    "EmailBody",
    "ResetPasswordBody",
    "ChangePasswordBody",
    "AuthResponseUser",
    "AuthResponse",
    "ResponseUser",
    "UpdateUserBody",
    "ChangeEmailBody",
    "PasswordBody",
]
