"""Admin Permission Enum."""

from enum import Enum


class AdminPermission(str, Enum):
    """관리자 권한 (admin 역할에만 부여)."""

    CONFIRMATION = "confirmation"
    TASKS = "tasks"
    KEYS = "keys"
    CONFLICTS = "conflicts"
    BLOG = "blog"
    CATEGORIES = "categories"
