"""Domain Services."""

from apps.accounts.domain.services.password_policy import PasswordPolicy, describe_elapsed

__all__ = ["PasswordPolicy", "describe_elapsed"]
