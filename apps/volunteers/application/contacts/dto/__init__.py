"""Contacts DTOs."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class CreateContactRequest:
    email: str
    social_network: str
    expiration_date: datetime | None = None


__all__ = ["CreateContactRequest"]
