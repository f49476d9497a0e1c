"""SQLAlchemy Adapters."""

from apps.volunteers.infrastructure.persistence_postgres.adapters.categories_gateway_sqla import (
    SqlaCategoriesGateway,
)
from apps.volunteers.infrastructure.persistence_postgres.adapters.contacts_gateway_sqla import (
    SqlaContactsGateway,
)
from apps.volunteers.infrastructure.persistence_postgres.adapters.tokens_gateway_sqla import (
    SqlaTokensCommandGateway,
)
from apps.volunteers.infrastructure.persistence_postgres.adapters.transaction_manager_sqla import (
    SqlaTransactionManager,
)
from apps.volunteers.infrastructure.persistence_postgres.adapters.users_gateway_sqla import (
    SqlaUsersCommandGateway,
    SqlaUsersQueryGateway,
)

__all__ = [
    "SqlaCategoriesGateway",
    "SqlaContactsGateway",
    "SqlaTokensCommandGateway",
    "SqlaTransactionManager",
    "SqlaUsersCommandGateway",
    "SqlaUsersQueryGateway",
]
