"""Domain Entities."""

from apps.volunteers.domain.entities.category import Category
from apps.volunteers.domain.entities.contact import Contact
from apps.volunteers.domain.entities.token import Token
from apps.volunteers.domain.entities.user import User

__all__ = ["Category", "Contact", "Token", "User"]
