"""Domain Services."""

from apps.volunteers.domain.services.user_policy import UserPolicy

__all__ = ["UserPolicy"]
