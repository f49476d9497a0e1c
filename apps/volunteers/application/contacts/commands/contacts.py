"""Contact commands."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from apps.volunteers.application.contacts.exceptions import ContactNotFoundError
from apps.volunteers.domain.entities import Contact

if TYPE_CHECKING:
    from apps.volunteers.application.common.ports import TransactionManager
    from apps.volunteers.application.contacts.dto import CreateContactRequest
    from apps.volunteers.application.contacts.ports import ContactsGateway


class CreateContactInteractor:
    def __init__(
        self,
        gateway: "ContactsGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._gateway = gateway
        self._tx = transaction_manager

    async def execute(self, request: "CreateContactRequest") -> Contact:
        """
        Raises:
            InvalidEmailError: 이메일 형식 오류
            ValidationError: 소셜 네트워크 누락
        """
        contact = Contact(
            email=request.email,
            social_network=request.social_network,
            expiration_date=request.expiration_date,
        )
        saved = await self._gateway.add(contact)
        await self._tx.commit()
        return saved


class DeleteContactInteractor:
    def __init__(
        self,
        gateway: "ContactsGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._gateway = gateway
        self._tx = transaction_manager

    async def execute(self, contact_id: UUID) -> None:
        if await self._gateway.get_by_id(contact_id) is None:
            raise ContactNotFoundError(contact_id)

        await self._gateway.delete(contact_id)
        await self._tx.commit()
