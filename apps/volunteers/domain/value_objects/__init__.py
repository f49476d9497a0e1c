"""Domain Value Objects."""

from apps.volunteers.domain.value_objects.email import Email

__all__ = ["Email"]
