"""Contacts Ports."""

from apps.volunteers.application.contacts.ports.contacts_gateway import ContactsGateway

__all__ = ["ContactsGateway"]
