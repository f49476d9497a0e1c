"""Categories / Contacts Tests."""

from __future__ import annotations

import uuid
from unittest.mock import AsyncMock, create_autospec

import pytest

from apps.volunteers.application.categories.commands import (
    CreateCategoryInteractor,
    DeleteCategoryInteractor,
    UpdateCategoryInteractor,
)
from apps.volunteers.application.categories.dto import (
    CreateCategoryRequest,
    UpdateCategoryRequest,
)
from apps.volunteers.application.categories.exceptions import CategoryNotFoundError
from apps.volunteers.application.categories.ports import CategoriesGateway
from apps.volunteers.application.categories.queries import GetCategoriesQuery
from apps.volunteers.application.contacts.commands import (
    CreateContactInteractor,
    DeleteContactInteractor,
)
from apps.volunteers.application.contacts.dto import CreateContactRequest
from apps.volunteers.application.contacts.exceptions import ContactNotFoundError
from apps.volunteers.application.contacts.ports import ContactsGateway
from apps.volunteers.application.contacts.queries import GetContactsQuery
from apps.volunteers.domain.entities import Category, Contact
from apps.volunteers.domain.exceptions import InvalidEmailError, ValidationError


@pytest.fixture
def categories_gateway() -> AsyncMock:
    gateway = create_autospec(CategoriesGateway, instance=True)
    gateway.add = AsyncMock(side_effect=lambda category: category)
    gateway.update = AsyncMock(side_effect=lambda category: category)
    gateway.get_by_id = AsyncMock(return_value=None)
    gateway.delete = AsyncMock()
    return gateway


@pytest.fixture
def contacts_gateway() -> AsyncMock:
    gateway = create_autospec(ContactsGateway, instance=True)
    gateway.add = AsyncMock(side_effect=lambda contact: contact)
    gateway.get_by_id = AsyncMock(return_value=None)
    gateway.delete = AsyncMock()
    return gateway


class TestCategories:
    @pytest.mark.asyncio
    async def test_create(self, categories_gateway, mock_transaction_manager) -> None:
        interactor = CreateCategoryInteractor(categories_gateway, mock_transaction_manager)

        category = await interactor.execute(CreateCategoryRequest(title="Food", points=5))

        assert category.title == "Food"
        categories_gateway.add.assert_awaited_once()
        mock_transaction_manager.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_rejects_non_positive_points(
        self, categories_gateway, mock_transaction_manager
    ) -> None:
        interactor = CreateCategoryInteractor(categories_gateway, mock_transaction_manager)

        with pytest.raises(ValidationError):
            await interactor.execute(CreateCategoryRequest(title="Food", points=0))

        categories_gateway.add.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_partial_update(self, categories_gateway, mock_transaction_manager) -> None:
        existing = Category(title="Food", points=5)
        categories_gateway.get_by_id.return_value = existing
        interactor = UpdateCategoryInteractor(categories_gateway, mock_transaction_manager)

        updated = await interactor.execute(existing.id, UpdateCategoryRequest(title="Medicine"))

        assert updated.title == "Medicine"
        assert updated.points == 5

    @pytest.mark.asyncio
    async def test_update_missing(self, categories_gateway, mock_transaction_manager) -> None:
        interactor = UpdateCategoryInteractor(categories_gateway, mock_transaction_manager)

        with pytest.raises(CategoryNotFoundError):
            await interactor.execute(uuid.uuid4(), UpdateCategoryRequest(points=3))

    @pytest.mark.asyncio
    async def test_delete_missing(self, categories_gateway, mock_transaction_manager) -> None:
        interactor = DeleteCategoryInteractor(categories_gateway, mock_transaction_manager)

        with pytest.raises(CategoryNotFoundError):
            await interactor.execute(uuid.uuid4())

        categories_gateway.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_query_by_id_missing(self, categories_gateway) -> None:
        with pytest.raises(CategoryNotFoundError):
            await GetCategoriesQuery(categories_gateway).by_id(uuid.uuid4())


class TestContacts:
    @pytest.mark.asyncio
    async def test_create(self, contacts_gateway, mock_transaction_manager) -> None:
        interactor = CreateContactInteractor(contacts_gateway, mock_transaction_manager)

        contact = await interactor.execute(
            CreateContactRequest(email="help@example.org", social_network="https://vk.com/help")
        )

        assert contact.email == "help@example.org"
        mock_transaction_manager.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_rejects_malformed_email(
        self, contacts_gateway, mock_transaction_manager
    ) -> None:
        interactor = CreateContactInteractor(contacts_gateway, mock_transaction_manager)

        with pytest.raises(InvalidEmailError):
            await interactor.execute(
                CreateContactRequest(email="help-at-example", social_network="https://vk.com/help")
            )

        contacts_gateway.add.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete(self, contacts_gateway, mock_transaction_manager) -> None:
        contact = Contact(email="help@example.org", social_network="https://vk.com/help")
        contacts_gateway.get_by_id.return_value = contact
        interactor = DeleteContactInteractor(contacts_gateway, mock_transaction_manager)

        await interactor.execute(contact.id)

        contacts_gateway.delete.assert_awaited_once_with(contact.id)

    @pytest.mark.asyncio
    async def test_query_by_id_missing(self, contacts_gateway) -> None:
        with pytest.raises(ContactNotFoundError):
            await GetContactsQuery(contacts_gateway).by_id(uuid.uuid4())
