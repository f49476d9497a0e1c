"""ContactsGateway Port."""

from typing import Protocol
from uuid import UUID

from apps.volunteers.domain.entities import Contact


class ContactsGateway(Protocol):
    """연락처 저장소.

    구현체:
        - SqlaContactsGateway (infrastructure/persistence_postgres/adapters/)
    """

    async def get_by_id(self, contact_id: UUID) -> Contact | None:
        ...

    async def list_all(self) -> list[Contact]:
        ...

    async def add(self, contact: Contact) -> Contact:
        ...

    async def delete(self, contact_id: UUID) -> None:
        ...
