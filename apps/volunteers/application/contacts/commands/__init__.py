"""Contacts Commands."""

from apps.volunteers.application.contacts.commands.contacts import (
    CreateContactInteractor,
    DeleteContactInteractor,
)

__all__ = ["CreateContactInteractor", "DeleteContactInteractor"]
