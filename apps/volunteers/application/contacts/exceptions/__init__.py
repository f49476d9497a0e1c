"""Contacts exceptions."""

from uuid import UUID

from apps.volunteers.application.common.exceptions.base import ApplicationError


class ContactNotFoundError(ApplicationError):
    """연락처를 찾을 수 없음."""

    def __init__(self, contact_id: UUID) -> None:
        self.contact_id = contact_id
        super().__init__(f"Contact not found: {contact_id}")


__all__ = ["ContactNotFoundError"]
