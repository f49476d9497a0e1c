"""Contacts Queries."""

from apps.volunteers.application.contacts.queries.get_contacts import GetContactsQuery

__all__ = ["GetContactsQuery"]
