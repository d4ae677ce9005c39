"""Users Ports."""

from apps.accounts.application.users.ports.users_command_gateway import UsersCommandGateway
from apps.accounts.application.users.ports.users_query_gateway import UsersQueryGateway

__all__ = ["UsersQueryGateway", "UsersCommandGateway"]
