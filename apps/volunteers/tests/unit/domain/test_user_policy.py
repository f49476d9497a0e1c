"""UserPolicy Domain Service Tests."""

from __future__ import annotations

import pytest

from apps.volunteers.domain.enums import UserRole, UserStatus
from apps.volunteers.domain.exceptions import ForbiddenError
from apps.volunteers.domain.services import UserPolicy


class TestRegistrationRules:
    @pytest.mark.parametrize("role", [UserRole.ADMIN, UserRole.MASTER])
    def test_register_forbidden_for_staff_roles(self, role: UserRole) -> None:
        with pytest.raises(ForbiddenError):
            UserPolicy.ensure_can_register(role)

    @pytest.mark.parametrize("role", [UserRole.RECIPIENT, UserRole.VOLUNTEER])
    def test_register_allowed(self, role: UserRole) -> None:
        UserPolicy.ensure_can_register(role)

    @pytest.mark.parametrize("role", [UserRole.RECIPIENT, UserRole.VOLUNTEER])
    def test_create_admin_forbidden_for_regular_roles(self, role: UserRole) -> None:
        with pytest.raises(ForbiddenError):
            UserPolicy.ensure_can_create_admin(role)

    @pytest.mark.parametrize("role", [UserRole.ADMIN, UserRole.MASTER])
    def test_create_admin_allowed(self, role: UserRole) -> None:
        UserPolicy.ensure_can_create_admin(role)


class TestStatusRules:
    @pytest.mark.parametrize("role", [UserRole.RECIPIENT, UserRole.ADMIN, UserRole.MASTER])
    def test_change_status_only_for_volunteers(self, make_user, role: UserRole) -> None:
        with pytest.raises(ForbiddenError):
            UserPolicy.ensure_can_change_status(make_user(role), UserStatus.CONFIRMED)

    @pytest.mark.parametrize("status", [UserStatus.CONFIRMED, UserStatus.UNCONFIRMED])
    def test_volunteer_can_toggle_confirmation(self, make_user, status: UserStatus) -> None:
        UserPolicy.ensure_can_change_status(make_user(UserRole.VOLUNTEER), status)

    def test_activated_not_assignable_via_status_change(self, make_user) -> None:
        with pytest.raises(ForbiddenError):
            UserPolicy.ensure_can_change_status(
                make_user(UserRole.VOLUNTEER), UserStatus.ACTIVATED
            )

    def test_give_key_only_for_volunteers(self, make_user) -> None:
        UserPolicy.ensure_can_give_key(make_user(UserRole.VOLUNTEER))
        with pytest.raises(ForbiddenError):
            UserPolicy.ensure_can_give_key(make_user(UserRole.RECIPIENT))

    def test_permissions_only_for_admins(self, make_user) -> None:
        UserPolicy.ensure_can_change_permissions(make_user(UserRole.ADMIN))
        with pytest.raises(ForbiddenError):
            UserPolicy.ensure_can_change_permissions(make_user(UserRole.MASTER))

    def test_blocked_user_rejected(self, make_user) -> None:
        user = make_user(UserRole.RECIPIENT, is_blocked=True)

        with pytest.raises(ForbiddenError):
            UserPolicy.ensure_not_blocked(user)
