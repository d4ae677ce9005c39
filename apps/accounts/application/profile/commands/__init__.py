"""Profile Commands."""

from apps.accounts.application.profile.commands.change_email import ChangeEmailInteractor
from apps.accounts.application.profile.commands.delete_account import DeleteAccountInteractor
from apps.accounts.application.profile.commands.update_profile import UpdateProfileInteractor

__all__ = ["UpdateProfileInteractor", "ChangeEmailInteractor", "DeleteAccountInteractor"]
