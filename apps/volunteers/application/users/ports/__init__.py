"""Users Ports."""

from apps.volunteers.application.users.ports.users_command_gateway import UsersCommandGateway
from apps.volunteers.application.users.ports.users_query_gateway import UsersQueryGateway

__all__ = ["UsersCommandGateway", "UsersQueryGateway"]
