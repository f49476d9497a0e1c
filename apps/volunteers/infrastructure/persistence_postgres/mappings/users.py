"""Users ORM Mapping.

User 도메인 엔티티와 DB 테이블의 매핑입니다.

타입 규칙:
    - TEXT: 기본 문자열 타입
    - role/status: enum 값을 VARCHAR로 저장 (native enum 미사용)
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    DateTime,
    Enum,
    Float,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, UUID
from sqlalchemy.sql import func

from apps.volunteers.domain.enums import UserRole, UserStatus
from apps.volunteers.infrastructure.persistence_postgres.mappings.types import (
    AdminPermissionArray,
)
from apps.volunteers.infrastructure.persistence_postgres.registry import mapper_registry


def _enum_values(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


users_table = Table(
    "users",
    mapper_registry.metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("login", Text, unique=True),
    Column("password", Text),
    Column("fullname", Text, nullable=False, index=True),
    Column(
        "role",
        Enum(UserRole, name="user_role", native_enum=False, values_callable=_enum_values),
        nullable=False,
    ),
    Column(
        "status",
        Enum(UserStatus, name="user_status", native_enum=False, values_callable=_enum_values),
        nullable=False,
    ),
    Column("is_blocked", Boolean, nullable=False, server_default="false"),
    Column("vk_id", BigInteger, unique=True),
    Column("vk", Text),
    Column("phone", String(20)),
    Column("address", Text),
    Column("avatar", Text),
    Column("coordinates", ARRAY(Float), nullable=False, server_default="{}"),
    Column("permissions", AdminPermissionArray, nullable=False, server_default="{}"),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)


def start_users_mapper() -> None:
    """Users 매퍼 시작.

    Note:
        Imperative Mapping 사용.
        도메인 엔티티가 SQLAlchemy에 의존하지 않도록 합니다.
    """
    from apps.volunteers.domain.entities.user import User

    # 이미 매핑된 경우 스킵
    if hasattr(User, "__mapper__"):
        return

    mapper_registry.map_imperatively(User, users_table)
