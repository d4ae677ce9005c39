"""Table mappings."""

from apps.accounts.infrastructure.persistence_postgres.mappings.users import (
    EMAIL_UNIQUE_CONSTRAINT,
    USERNAME_UNIQUE_CONSTRAINT,
    metadata,
    row_to_user,
    user_to_values,
    users_table,
)

__all__ = [
    "metadata",
    "users_table",
    "row_to_user",
    "user_to_values",
    "EMAIL_UNIQUE_CONSTRAINT",
    "USERNAME_UNIQUE_CONSTRAINT",
]
