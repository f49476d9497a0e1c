"""Contacts Controller.

조회는 공개, 생성/삭제는 admin/master 전용입니다.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from apps.volunteers.application.contacts.commands import (
    CreateContactInteractor,
    DeleteContactInteractor,
)
from apps.volunteers.application.contacts.dto import CreateContactRequest
from apps.volunteers.application.contacts.queries import GetContactsQuery
from apps.volunteers.domain.entities import User
from apps.volunteers.presentation.http.auth.dependencies import require_staff
from apps.volunteers.presentation.http.schemas.contacts import (
    ContactCreateRequest,
    ContactResponse,
)
from apps.volunteers.setup.dependencies import (
    get_contacts_query,
    get_create_contact_interactor,
    get_delete_contact_interactor,
)

router = APIRouter()


@router.get("", response_model=list[ContactResponse])
async def list_contacts(
    query: GetContactsQuery = Depends(get_contacts_query),
) -> list[ContactResponse]:
    return [ContactResponse.model_validate(c) for c in await query.list_all()]


@router.get("/{contact_id}", response_model=ContactResponse)
async def get_contact(
    contact_id: UUID,
    query: GetContactsQuery = Depends(get_contacts_query),
) -> ContactResponse:
    return ContactResponse.model_validate(await query.by_id(contact_id))


@router.post("", response_model=ContactResponse, status_code=status.HTTP_201_CREATED)
async def create_contact(
    body: ContactCreateRequest,
    _: User = Depends(require_staff),
    interactor: CreateContactInteractor = Depends(get_create_contact_interactor),
) -> ContactResponse:
    contact = await interactor.execute(
        CreateContactRequest(
            email=body.email,
            social_network=body.social_network,
            expiration_date=body.expiration_date,
        )
    )
    return ContactResponse.model_validate(contact)


@router.delete("/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contact(
    contact_id: UUID,
    _: User = Depends(require_staff),
    interactor: DeleteContactInteractor = Depends(get_delete_contact_interactor),
) -> None:
    await interactor.execute(contact_id)
