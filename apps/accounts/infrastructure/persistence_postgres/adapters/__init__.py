"""PostgreSQL adapters."""

from apps.accounts.infrastructure.persistence_postgres.adapters.transaction_manager_sqla import (
    SqlaTransactionManager,
)
from apps.accounts.infrastructure.persistence_postgres.adapters.users_gateway_sqla import (
    SqlaUsersCommandGateway,
    SqlaUsersQueryGateway,
)

__all__ = ["SqlaUsersQueryGateway", "SqlaUsersCommandGateway", "SqlaTransactionManager"]
