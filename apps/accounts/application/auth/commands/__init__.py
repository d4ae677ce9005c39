"""Auth Commands."""

from apps.accounts.application.auth.commands.change_password import ChangePasswordInteractor
from apps.accounts.application.auth.commands.confirm_email import ConfirmEmailInteractor
from apps.accounts.application.auth.commands.forgot_password import ForgotPasswordInteractor
from apps.accounts.application.auth.commands.logout import LogoutInteractor
from apps.accounts.application.auth.commands.refresh_tokens import RefreshTokensInteractor
from apps.accounts.application.auth.commands.reset_password import ResetPasswordInteractor
from apps.accounts.application.auth.commands.sign_in import SignInInteractor
from apps.accounts.application.auth.commands.sign_up import SignUpInteractor

__all__ = [
    "SignUpInteractor",
    "SignInInteractor",
    "RefreshTokensInteractor",
    "LogoutInteractor",
    "ConfirmEmailInteractor",
    "ForgotPasswordInteractor",
    "ResetPasswordInteractor",
    "ChangePasswordInteractor",
]
