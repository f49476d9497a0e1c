"""Custom column types."""

from __future__ import annotations

from sqlalchemy import Text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.types import TypeDecorator

from apps.volunteers.domain.enums import AdminPermission


class AdminPermissionArray(TypeDecorator):
    """list[AdminPermission] <-> TEXT[]."""

    impl = ARRAY(Text)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return []
        return [AdminPermission(item).value for item in value]

    def process_result_value(self, value, dialect):
        return [AdminPermission(item) for item in value or []]
