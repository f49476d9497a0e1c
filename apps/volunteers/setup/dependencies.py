"""Dependency injection setup.

FastAPI Depends를 사용한 의존성 주입 설정입니다.
요청 단위로 하나의 AsyncSession을 공유하므로 gateway와 TransactionManager는
같은 트랜잭션 안에서 동작합니다.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from apps.volunteers.application.auth.commands import (
    BuildLoginUrlInteractor,
    SignInInteractor,
    VkCallbackInteractor,
)
from apps.volunteers.application.auth.queries import (
    GetCurrentUserQuery,
    ValidatePasswordQuery,
)
from apps.volunteers.application.categories.commands import (
    CreateCategoryInteractor,
    DeleteCategoryInteractor,
    UpdateCategoryInteractor,
)
from apps.volunteers.application.categories.queries import GetCategoriesQuery
from apps.volunteers.application.contacts.commands import (
    CreateContactInteractor,
    DeleteContactInteractor,
)
from apps.volunteers.application.contacts.queries import GetContactsQuery
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
from apps.volunteers.application.users.queries import GetUserQuery, ListUsersQuery
from apps.volunteers.application.users.services import UserRegistrar
from apps.volunteers.infrastructure.oauth import VkOAuthProvider
from apps.volunteers.infrastructure.persistence_postgres.adapters import (
    SqlaCategoriesGateway,
    SqlaContactsGateway,
    SqlaTokensCommandGateway,
    SqlaTransactionManager,
    SqlaUsersCommandGateway,
    SqlaUsersQueryGateway,
)
from apps.volunteers.infrastructure.persistence_postgres.session import get_async_session
from apps.volunteers.infrastructure.security import BcryptPasswordHasher, JwtTokenService
from apps.volunteers.setup.config import Settings, get_settings

# Type alias for dependency injection
SessionDep = Annotated[AsyncSession, Depends(get_async_session)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


# ============================================================
# Infrastructure Dependencies
# ============================================================


def get_users_query_gateway(session: SessionDep) -> SqlaUsersQueryGateway:
    """UsersQueryGateway 제공자."""
    return SqlaUsersQueryGateway(session)


def get_users_command_gateway(session: SessionDep) -> SqlaUsersCommandGateway:
    """UsersCommandGateway 제공자."""
    return SqlaUsersCommandGateway(session)


def get_tokens_gateway(session: SessionDep) -> SqlaTokensCommandGateway:
    return SqlaTokensCommandGateway(session)


def get_categories_gateway(session: SessionDep) -> SqlaCategoriesGateway:
    return SqlaCategoriesGateway(session)


def get_contacts_gateway(session: SessionDep) -> SqlaContactsGateway:
    return SqlaContactsGateway(session)


def get_transaction_manager(session: SessionDep) -> SqlaTransactionManager:
    """TransactionManager 제공자."""
    return SqlaTransactionManager(session)


def get_password_hasher(settings: SettingsDep) -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=settings.bcrypt_rounds)


def get_token_service(settings: SettingsDep) -> JwtTokenService:
    """SessionTokenIssuer 제공자."""
    return JwtTokenService(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        default_expire_minutes=settings.session_token_exp_minutes,
    )


def get_oauth_provider(settings: SettingsDep) -> VkOAuthProvider:
    """VK OAuth 프로바이더 제공자."""
    return VkOAuthProvider(
        client_id=settings.vk_app_id,
        client_secret=settings.vk_app_secret,
        api_version=settings.vk_api_version,
        timeout_seconds=settings.oauth_timeout_seconds,
    )


UsersQueryDep = Annotated[SqlaUsersQueryGateway, Depends(get_users_query_gateway)]
UsersCommandDep = Annotated[SqlaUsersCommandGateway, Depends(get_users_command_gateway)]
TransactionDep = Annotated[SqlaTransactionManager, Depends(get_transaction_manager)]
TokenServiceDep = Annotated[JwtTokenService, Depends(get_token_service)]


# ============================================================
# Application Services
# ============================================================


def get_user_registrar(
    query_gateway: UsersQueryDep,
    command_gateway: UsersCommandDep,
    password_hasher: BcryptPasswordHasher = Depends(get_password_hasher),
) -> UserRegistrar:
    """UserRegistrar 인스턴스를 반환합니다."""
    return UserRegistrar(query_gateway, command_gateway, password_hasher)


RegistrarDep = Annotated[UserRegistrar, Depends(get_user_registrar)]


# ============================================================
# Auth
# ============================================================


def get_build_login_url_interactor(
    settings: SettingsDep,
    oauth_provider: VkOAuthProvider = Depends(get_oauth_provider),
) -> BuildLoginUrlInteractor:
    return BuildLoginUrlInteractor(oauth_provider, settings.vk_redirect_uri)


def get_vk_callback_interactor(
    settings: SettingsDep,
    users_query_gateway: UsersQueryDep,
    registrar: RegistrarDep,
    token_issuer: TokenServiceDep,
    transaction_manager: TransactionDep,
    oauth_provider: VkOAuthProvider = Depends(get_oauth_provider),
    tokens_gateway: SqlaTokensCommandGateway = Depends(get_tokens_gateway),
) -> VkCallbackInteractor:
    """VkCallbackInteractor 인스턴스를 반환합니다."""
    return VkCallbackInteractor(
        oauth_provider=oauth_provider,
        users_query_gateway=users_query_gateway,
        registrar=registrar,
        tokens_gateway=tokens_gateway,
        token_issuer=token_issuer,
        transaction_manager=transaction_manager,
        redirect_uri=settings.vk_redirect_uri,
    )


def get_validate_password_query(
    users_query_gateway: UsersQueryDep,
    password_hasher: BcryptPasswordHasher = Depends(get_password_hasher),
) -> ValidatePasswordQuery:
    return ValidatePasswordQuery(users_query_gateway, password_hasher)


def get_sign_in_interactor(
    token_issuer: TokenServiceDep,
    validate_password: ValidatePasswordQuery = Depends(get_validate_password_query),
) -> SignInInteractor:
    return SignInInteractor(validate_password, token_issuer)


def get_current_user_query(
    token_issuer: TokenServiceDep,
    users_query_gateway: UsersQueryDep,
) -> GetCurrentUserQuery:
    return GetCurrentUserQuery(token_issuer, users_query_gateway)


# ============================================================
# Users
# ============================================================


def get_create_user_interactor(
    registrar: RegistrarDep, transaction_manager: TransactionDep
) -> CreateUserInteractor:
    return CreateUserInteractor(registrar, transaction_manager)


def get_create_admin_interactor(
    registrar: RegistrarDep, transaction_manager: TransactionDep
) -> CreateAdminInteractor:
    return CreateAdminInteractor(registrar, transaction_manager)


def get_change_status_interactor(
    query_gateway: UsersQueryDep,
    command_gateway: UsersCommandDep,
    transaction_manager: TransactionDep,
) -> ChangeStatusInteractor:
    return ChangeStatusInteractor(query_gateway, command_gateway, transaction_manager)


def get_give_key_interactor(
    query_gateway: UsersQueryDep,
    command_gateway: UsersCommandDep,
    transaction_manager: TransactionDep,
) -> GiveKeyInteractor:
    return GiveKeyInteractor(query_gateway, command_gateway, transaction_manager)


def get_change_permissions_interactor(
    query_gateway: UsersQueryDep,
    command_gateway: UsersCommandDep,
    transaction_manager: TransactionDep,
) -> ChangeAdminPermissionsInteractor:
    return ChangeAdminPermissionsInteractor(query_gateway, command_gateway, transaction_manager)


def get_block_user_interactor(
    query_gateway: UsersQueryDep,
    command_gateway: UsersCommandDep,
    transaction_manager: TransactionDep,
) -> BlockUserInteractor:
    return BlockUserInteractor(query_gateway, command_gateway, transaction_manager)


def get_update_user_interactor(
    query_gateway: UsersQueryDep,
    command_gateway: UsersCommandDep,
    transaction_manager: TransactionDep,
) -> UpdateUserInteractor:
    return UpdateUserInteractor(query_gateway, command_gateway, transaction_manager)


def get_delete_user_interactor(
    query_gateway: UsersQueryDep,
    command_gateway: UsersCommandDep,
    transaction_manager: TransactionDep,
) -> DeleteUserInteractor:
    return DeleteUserInteractor(query_gateway, command_gateway, transaction_manager)


def get_get_user_query(query_gateway: UsersQueryDep) -> GetUserQuery:
    return GetUserQuery(query_gateway)


def get_list_users_query(query_gateway: UsersQueryDep) -> ListUsersQuery:
    return ListUsersQuery(query_gateway)


# ============================================================
# Categories / Contacts
# ============================================================


def get_categories_query(
    gateway: SqlaCategoriesGateway = Depends(get_categories_gateway),
) -> GetCategoriesQuery:
    return GetCategoriesQuery(gateway)


def get_create_category_interactor(
    transaction_manager: TransactionDep,
    gateway: SqlaCategoriesGateway = Depends(get_categories_gateway),
) -> CreateCategoryInteractor:
    return CreateCategoryInteractor(gateway, transaction_manager)


def get_update_category_interactor(
    transaction_manager: TransactionDep,
    gateway: SqlaCategoriesGateway = Depends(get_categories_gateway),
) -> UpdateCategoryInteractor:
    return UpdateCategoryInteractor(gateway, transaction_manager)


def get_delete_category_interactor(
    transaction_manager: TransactionDep,
    gateway: SqlaCategoriesGateway = Depends(get_categories_gateway),
) -> DeleteCategoryInteractor:
    return DeleteCategoryInteractor(gateway, transaction_manager)


def get_contacts_query(
    gateway: SqlaContactsGateway = Depends(get_contacts_gateway),
) -> GetContactsQuery:
    return GetContactsQuery(gateway)


def get_create_contact_interactor(
    transaction_manager: TransactionDep,
    gateway: SqlaContactsGateway = Depends(get_contacts_gateway),
) -> CreateContactInteractor:
    return CreateContactInteractor(gateway, transaction_manager)


def get_delete_contact_interactor(
    transaction_manager: TransactionDep,
    gateway: SqlaContactsGateway = Depends(get_contacts_gateway),
) -> DeleteContactInteractor:
    return DeleteContactInteractor(gateway, transaction_manager)
