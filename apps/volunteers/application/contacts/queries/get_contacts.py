"""GetContacts Query."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from apps.volunteers.application.contacts.exceptions import ContactNotFoundError

if TYPE_CHECKING:
    from apps.volunteers.application.contacts.ports import ContactsGateway
    from apps.volunteers.domain.entities import Contact


class GetContactsQuery:
    def __init__(self, gateway: "ContactsGateway") -> None:
        self._gateway = gateway

    async def list_all(self) -> list["Contact"]:
        return await self._gateway.list_all()

    async def by_id(self, contact_id: UUID) -> "Contact":
        contact = await self._gateway.get_by_id(contact_id)
        if contact is None:
            raise ContactNotFoundError(contact_id)
        return contact
