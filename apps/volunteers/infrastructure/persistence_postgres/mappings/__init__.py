"""ORM Mappings.

도메인 엔티티와 DB 테이블의 매핑을 정의합니다.
"""

from apps.volunteers.infrastructure.persistence_postgres.mappings.categories import (
    categories_table,
    start_categories_mapper,
)
from apps.volunteers.infrastructure.persistence_postgres.mappings.contacts import (
    contacts_table,
    start_contacts_mapper,
)
from apps.volunteers.infrastructure.persistence_postgres.mappings.tokens import (
    start_tokens_mapper,
    tokens_table,
)
from apps.volunteers.infrastructure.persistence_postgres.mappings.users import (
    start_users_mapper,
    users_table,
)


def start_all_mappers() -> None:
    """모든 매퍼 시작."""
    start_users_mapper()
    start_tokens_mapper()
    start_categories_mapper()
    start_contacts_mapper()


__all__ = [
    "categories_table",
    "contacts_table",
    "start_all_mappers",
    "tokens_table",
    "users_table",
]
