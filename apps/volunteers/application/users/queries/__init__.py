"""Users Queries."""

from apps.volunteers.application.users.queries.get_user import GetUserQuery
from apps.volunteers.application.users.queries.list_users import ListUsersQuery

__all__ = ["GetUserQuery", "ListUsersQuery"]
