"""Auth DTOs."""

from apps.accounts.application.auth.dto.auth import (
    AuthResult,
    ChangePasswordRequest,
    ConfirmEmailRequest,
    ForgotPasswordRequest,
    LogoutRequest,
    RefreshTokensRequest,
    ResetPasswordRequest,
    SignInRequest,
    SignUpRequest,
)

__all__ = [
    "SignUpRequest",
    "SignInRequest",
    "RefreshTokensRequest",
    "LogoutRequest",
    "ConfirmEmailRequest",
    "ForgotPasswordRequest",
    "ResetPasswordRequest",
    "ChangePasswordRequest",
    "AuthResult",
]
