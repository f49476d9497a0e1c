"""SQLAlchemy implementation of contact gateway."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from apps.volunteers.domain.entities.contact import Contact
from apps.volunteers.infrastructure.persistence_postgres.mappings.contacts import contacts_table


class SqlaContactsGateway:
    """연락처 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, contact_id: UUID) -> Contact | None:
        result = await self._session.execute(
            select(Contact).where(contacts_table.c.id == contact_id)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> list[Contact]:
        result = await self._session.execute(
            select(Contact).order_by(contacts_table.c.created_at)
        )
        return list(result.scalars().all())

    async def add(self, contact: Contact) -> Contact:
        self._session.add(contact)
        await self._session.flush()
        return contact

    async def delete(self, contact_id: UUID) -> None:
        await self._session.execute(
            delete(contacts_table).where(contacts_table.c.id == contact_id)
        )
        await self._session.flush()
