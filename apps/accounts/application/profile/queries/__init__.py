"""Profile Queries."""

from apps.accounts.application.profile.queries.get_user import GetCurrentUserQuery, GetUserQuery

__all__ = ["GetUserQuery", "GetCurrentUserQuery"]
