"""Users Services."""

from apps.accounts.application.users.services.naming import (
    format_name,
    is_valid_username,
    point_slug,
)
from apps.accounts.application.users.services.user_lookup import UserLookup
from apps.accounts.application.users.services.username_generator import UsernameGenerator

__all__ = [
    "UserLookup",
    "UsernameGenerator",
    "format_name",
    "point_slug",
    "is_valid_username",
]
