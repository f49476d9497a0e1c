"""Domain Entity Tests."""

from __future__ import annotations

import pytest

from apps.volunteers.domain.entities import Category, Contact, Token, User
from apps.volunteers.domain.enums import AdminPermission, UserRole, UserStatus
from apps.volunteers.domain.exceptions import InvalidEmailError, ValidationError


class TestUser:
    """User 엔티티 테스트."""

    def test_defaults(self) -> None:
        user = User(fullname="Anna", role=UserRole.RECIPIENT)

        assert user.status == UserStatus.UNCONFIRMED
        assert user.is_blocked is False
        assert user.coordinates == []
        assert user.permissions == []
        assert user.password is None

    def test_toggle_blocked_twice_restores_state(self) -> None:
        """차단 토글을 두 번 적용하면 원래 상태로 돌아옴."""
        user = User(fullname="Anna", role=UserRole.VOLUNTEER)

        user.toggle_blocked()
        assert user.is_blocked is True

        user.toggle_blocked()
        assert user.is_blocked is False

    def test_set_permissions_dedupes_preserving_order(self) -> None:
        user = User(fullname="Admin", role=UserRole.ADMIN)

        user.set_permissions(
            [AdminPermission.TASKS, AdminPermission.BLOG, AdminPermission.TASKS]
        )

        assert user.permissions == [AdminPermission.TASKS, AdminPermission.BLOG]

    def test_activate(self) -> None:
        user = User(fullname="Anna", role=UserRole.VOLUNTEER)
        before = user.updated_at

        user.activate()

        assert user.status == UserStatus.ACTIVATED
        assert user.updated_at >= before

    def test_update_profile_ignores_none(self) -> None:
        user = User(fullname="Anna", role=UserRole.RECIPIENT, phone="+7000", address="Moscow")

        user.update_profile(fullname="Anna K.", coordinates=[55.75, 37.61])

        assert user.fullname == "Anna K."
        assert user.phone == "+7000"
        assert user.address == "Moscow"
        assert user.coordinates == [55.75, 37.61]

    def test_repr_hides_credentials(self) -> None:
        user = User(fullname="Anna", role=UserRole.RECIPIENT, login="anna", password="hash")

        assert "anna" not in repr(user)
        assert "hash" not in repr(user)


class TestToken:
    def test_repr_hides_token_value(self, make_user) -> None:
        token = Token(token="vk-secret-token", expires_in=3600, user_id=make_user().id)

        assert "vk-secret-token" not in repr(token)


class TestCategory:
    """Category 엔티티 테스트."""

    def test_create_strips_title(self) -> None:
        category = Category(title="  Food  ", points=10)

        assert category.title == "Food"
        assert category.points == 10

    @pytest.mark.parametrize("points", [0, -5])
    def test_rejects_non_positive_points(self, points: int) -> None:
        with pytest.raises(ValidationError):
            Category(title="Food", points=points)

    @pytest.mark.parametrize("title", ["", "x", "a" * 101])
    def test_rejects_title_length(self, title: str) -> None:
        with pytest.raises(ValidationError):
            Category(title=title, points=1)

    def test_partial_update(self) -> None:
        category = Category(title="Food", points=10)

        category.update(points=20)

        assert category.title == "Food"
        assert category.points == 20

    def test_update_validates(self) -> None:
        category = Category(title="Food", points=10)

        with pytest.raises(ValidationError):
            category.update(points=0)


class TestContact:
    """Contact 엔티티 테스트."""

    def test_create(self) -> None:
        contact = Contact(email="help@example.org", social_network=" https://vk.com/help ")

        assert contact.email == "help@example.org"
        assert contact.social_network == "https://vk.com/help"
        assert contact.expiration_date is None

    def test_rejects_malformed_email(self) -> None:
        with pytest.raises(InvalidEmailError):
            Contact(email="not-an-email", social_network="https://vk.com/help")

    def test_rejects_empty_social_network(self) -> None:
        with pytest.raises(ValidationError):
            Contact(email="help@example.org", social_network="   ")
