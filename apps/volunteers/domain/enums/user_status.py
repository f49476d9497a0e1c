"""User Status Enum."""

from enum import Enum


class UserStatus(str, Enum):
    """사용자 상태.

    차단 여부는 상태와 별개로 User.is_blocked 플래그로 관리합니다.
    """

    UNCONFIRMED = "unconfirmed"
    CONFIRMED = "confirmed"
    ACTIVATED = "activated"
