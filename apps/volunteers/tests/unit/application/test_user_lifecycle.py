"""User Lifecycle Tests.

역할 기반 생성, 상태 전이, 권한 변경, 차단, 수정, 삭제, 조회.
"""

from __future__ import annotations

import dataclasses
import uuid

import pytest

from apps.volunteers.application.users.commands import (
    BlockUserInteractor,
    ChangeAdminPermissionsInteractor,
    ChangeStatusInteractor,
    CreateAdminInteractor,
    CreateUserInteractor,
    DeleteUserInteractor,
    GiveKeyInteractor,
    UpdateUserInteractor,
)
from apps.volunteers.application.users.dto import (
    CreateAdminRequest,
    CreateUserRequest,
    UpdateUserRequest,
    UserView,
)
from apps.volunteers.application.users.exceptions import (
    ForbiddenError,
    LoginAlreadyExistsError,
    NoChangesProvidedError,
    UserNotFoundError,
)
from apps.volunteers.application.users.queries import GetUserQuery, ListUsersQuery
from apps.volunteers.application.users.services import UserRegistrar
from apps.volunteers.domain.enums import AdminPermission, UserRole, UserStatus


@pytest.fixture
def registrar(users_gateway, password_hasher) -> UserRegistrar:
    return UserRegistrar(users_gateway, users_gateway, password_hasher)


def _mutation(cls, users_gateway, mock_transaction_manager):
    return cls(users_gateway, users_gateway, mock_transaction_manager)


class TestUserView:
    def test_never_exposes_credentials(self, make_user) -> None:
        user = make_user(login="ivan", password="hashed::s3cret")

        view = UserView.from_entity(user)

        field_names = {f.name for f in dataclasses.fields(view)}
        assert "login" not in field_names
        assert "password" not in field_names


class TestCreateUserInteractor:
    """CreateUserInteractor 테스트."""

    @pytest.mark.asyncio
    async def test_creates_user_with_hashed_password(
        self, registrar, users_gateway, mock_transaction_manager
    ) -> None:
        interactor = CreateUserInteractor(registrar, mock_transaction_manager)

        view = await interactor.execute(
            CreateUserRequest(
                login="anna",
                password="s3cret",
                fullname="Anna Smirnova",
                role=UserRole.RECIPIENT,
                phone="+79990000000",
            )
        )

        stored = users_gateway.users[view.id]
        assert stored.password == "hashed::s3cret"
        assert stored.status == UserStatus.UNCONFIRMED
        assert view.role == UserRole.RECIPIENT
        mock_transaction_manager.commit.assert_awaited_once()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("role", [UserRole.ADMIN, UserRole.MASTER])
    async def test_staff_roles_forbidden(
        self, registrar, users_gateway, mock_transaction_manager, role: UserRole
    ) -> None:
        interactor = CreateUserInteractor(registrar, mock_transaction_manager)

        with pytest.raises(ForbiddenError):
            await interactor.execute(
                CreateUserRequest(login="x", password="p", fullname="X", role=role)
            )

        assert users_gateway.users == {}
        mock_transaction_manager.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_duplicate_login(
        self, registrar, users_gateway, mock_transaction_manager, make_user
    ) -> None:
        await users_gateway.add(make_user(login="anna"))
        interactor = CreateUserInteractor(registrar, mock_transaction_manager)

        with pytest.raises(LoginAlreadyExistsError):
            await interactor.execute(
                CreateUserRequest(
                    login="anna", password="p", fullname="Anna", role=UserRole.VOLUNTEER
                )
            )


class TestCreateAdminInteractor:
    @pytest.mark.asyncio
    async def test_creates_activated_admin(
        self, registrar, users_gateway, mock_transaction_manager
    ) -> None:
        interactor = CreateAdminInteractor(registrar, mock_transaction_manager)

        view = await interactor.execute(
            CreateAdminRequest(
                login="admin",
                password="s3cret",
                fullname="Admin",
                permissions=[AdminPermission.KEYS, AdminPermission.KEYS, AdminPermission.BLOG],
            )
        )

        assert view.role == UserRole.ADMIN
        assert view.status == UserStatus.ACTIVATED
        assert view.permissions == [AdminPermission.KEYS, AdminPermission.BLOG]
        assert users_gateway.users[view.id].password == "hashed::s3cret"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("role", [UserRole.RECIPIENT, UserRole.VOLUNTEER])
    async def test_regular_roles_forbidden(
        self, registrar, mock_transaction_manager, role: UserRole
    ) -> None:
        interactor = CreateAdminInteractor(registrar, mock_transaction_manager)

        with pytest.raises(ForbiddenError):
            await interactor.execute(
                CreateAdminRequest(login="x", password="p", fullname="X", role=role)
            )


class TestChangeStatusInteractor:
    """ChangeStatusInteractor 테스트."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("role", [UserRole.RECIPIENT, UserRole.ADMIN, UserRole.MASTER])
    async def test_non_volunteer_forbidden(
        self, users_gateway, mock_transaction_manager, make_user, role: UserRole
    ) -> None:
        user = make_user(role)
        await users_gateway.add(user)
        interactor = _mutation(ChangeStatusInteractor, users_gateway, mock_transaction_manager)

        with pytest.raises(ForbiddenError):
            await interactor.execute(user.id, UserStatus.CONFIRMED)

        assert user.status == UserStatus.UNCONFIRMED

    @pytest.mark.asyncio
    async def test_volunteer_confirmed_idempotently(
        self, users_gateway, mock_transaction_manager, make_user
    ) -> None:
        user = make_user(UserRole.VOLUNTEER)
        await users_gateway.add(user)
        interactor = _mutation(ChangeStatusInteractor, users_gateway, mock_transaction_manager)

        first = await interactor.execute(user.id, UserStatus.CONFIRMED)
        second = await interactor.execute(user.id, UserStatus.CONFIRMED)

        assert first.status == UserStatus.CONFIRMED
        assert second.status == UserStatus.CONFIRMED
        assert users_gateway.users[user.id].status == UserStatus.CONFIRMED

    @pytest.mark.asyncio
    async def test_activated_forbidden(
        self, users_gateway, mock_transaction_manager, make_user
    ) -> None:
        user = make_user(UserRole.VOLUNTEER)
        await users_gateway.add(user)
        interactor = _mutation(ChangeStatusInteractor, users_gateway, mock_transaction_manager)

        with pytest.raises(ForbiddenError):
            await interactor.execute(user.id, UserStatus.ACTIVATED)

    @pytest.mark.asyncio
    async def test_unknown_user(self, users_gateway, mock_transaction_manager) -> None:
        interactor = _mutation(ChangeStatusInteractor, users_gateway, mock_transaction_manager)

        with pytest.raises(UserNotFoundError):
            await interactor.execute(uuid.uuid4(), UserStatus.CONFIRMED)


class TestGiveKeyInteractor:
    @pytest.mark.asyncio
    async def test_activates_volunteer(
        self, users_gateway, mock_transaction_manager, make_user
    ) -> None:
        user = make_user(UserRole.VOLUNTEER, status=UserStatus.CONFIRMED)
        await users_gateway.add(user)
        interactor = _mutation(GiveKeyInteractor, users_gateway, mock_transaction_manager)

        view = await interactor.execute(user.id)

        assert view.status == UserStatus.ACTIVATED

    @pytest.mark.asyncio
    async def test_recipient_forbidden(
        self, users_gateway, mock_transaction_manager, make_user
    ) -> None:
        user = make_user(UserRole.RECIPIENT)
        await users_gateway.add(user)
        interactor = _mutation(GiveKeyInteractor, users_gateway, mock_transaction_manager)

        with pytest.raises(ForbiddenError):
            await interactor.execute(user.id)


class TestChangeAdminPermissionsInteractor:
    @pytest.mark.asyncio
    async def test_replaces_permissions(
        self, users_gateway, mock_transaction_manager, make_user
    ) -> None:
        admin = make_user(UserRole.ADMIN, permissions=[AdminPermission.BLOG])
        await users_gateway.add(admin)
        interactor = _mutation(
            ChangeAdminPermissionsInteractor, users_gateway, mock_transaction_manager
        )

        view = await interactor.execute(
            admin.id, [AdminPermission.CATEGORIES, AdminPermission.CONFLICTS]
        )

        assert view.permissions == [AdminPermission.CATEGORIES, AdminPermission.CONFLICTS]

    @pytest.mark.asyncio
    async def test_non_admin_forbidden(
        self, users_gateway, mock_transaction_manager, make_user
    ) -> None:
        volunteer = make_user(UserRole.VOLUNTEER)
        await users_gateway.add(volunteer)
        interactor = _mutation(
            ChangeAdminPermissionsInteractor, users_gateway, mock_transaction_manager
        )

        with pytest.raises(ForbiddenError):
            await interactor.execute(volunteer.id, [AdminPermission.TASKS])


class TestBlockUserInteractor:
    @pytest.mark.asyncio
    async def test_blocking_twice_restores_state(
        self, users_gateway, mock_transaction_manager, make_user
    ) -> None:
        user = make_user(UserRole.RECIPIENT)
        await users_gateway.add(user)
        interactor = _mutation(BlockUserInteractor, users_gateway, mock_transaction_manager)

        first = await interactor.execute(user.id)
        second = await interactor.execute(user.id)

        assert first.is_blocked is True
        assert second.is_blocked is False
        assert mock_transaction_manager.commit.await_count == 2


class TestUpdateUserInteractor:
    @pytest.mark.asyncio
    async def test_updates_profile_fields(
        self, users_gateway, mock_transaction_manager, make_user
    ) -> None:
        user = make_user(UserRole.VOLUNTEER, phone="+7000")
        await users_gateway.add(user)
        interactor = _mutation(UpdateUserInteractor, users_gateway, mock_transaction_manager)

        view = await interactor.execute(
            user.id, UpdateUserRequest(address="Kazan", coordinates=[55.79, 49.12])
        )

        assert view.address == "Kazan"
        assert view.coordinates == [55.79, 49.12]
        assert view.phone == "+7000"
        assert view.role == UserRole.VOLUNTEER

    @pytest.mark.asyncio
    async def test_empty_update_rejected(
        self, users_gateway, mock_transaction_manager, make_user
    ) -> None:
        user = make_user()
        await users_gateway.add(user)
        interactor = _mutation(UpdateUserInteractor, users_gateway, mock_transaction_manager)

        with pytest.raises(NoChangesProvidedError):
            await interactor.execute(user.id, UpdateUserRequest())


class TestDeleteUserInteractor:
    @pytest.mark.asyncio
    async def test_deletes(self, users_gateway, mock_transaction_manager, make_user) -> None:
        user = make_user()
        await users_gateway.add(user)
        interactor = _mutation(DeleteUserInteractor, users_gateway, mock_transaction_manager)

        await interactor.execute(user.id)

        assert users_gateway.users == {}
        mock_transaction_manager.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unknown_user(self, users_gateway, mock_transaction_manager) -> None:
        interactor = _mutation(DeleteUserInteractor, users_gateway, mock_transaction_manager)

        with pytest.raises(UserNotFoundError):
            await interactor.execute(uuid.uuid4())


class TestUserQueries:
    @pytest.mark.asyncio
    async def test_by_id_and_fullname(self, users_gateway, make_user) -> None:
        user = make_user(fullname="Olga Ivanova")
        await users_gateway.add(user)
        query = GetUserQuery(users_gateway)

        assert (await query.by_id(user.id)).id == user.id
        assert (await query.by_fullname("Olga Ivanova")).id == user.id

    @pytest.mark.asyncio
    async def test_not_found(self, users_gateway) -> None:
        query = GetUserQuery(users_gateway)

        with pytest.raises(UserNotFoundError):
            await query.by_id(uuid.uuid4())
        with pytest.raises(UserNotFoundError):
            await query.by_fullname("Nobody")

    @pytest.mark.asyncio
    async def test_list_returns_views(self, users_gateway, make_user) -> None:
        await users_gateway.add(make_user(fullname="A"))
        await users_gateway.add(make_user(fullname="B"))

        views = await ListUsersQuery(users_gateway).execute()

        assert sorted(v.fullname for v in views) == ["A", "B"]
        assert all(isinstance(v, UserView) for v in views)
