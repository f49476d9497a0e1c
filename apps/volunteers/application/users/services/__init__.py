"""Users Application Services."""

from apps.volunteers.application.users.services.lookup import get_existing_user
from apps.volunteers.application.users.services.user_registrar import UserRegistrar

__all__ = ["UserRegistrar", "get_existing_user"]
