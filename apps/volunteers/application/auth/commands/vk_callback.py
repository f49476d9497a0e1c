"""VkCallback Command.

VK 인증 코드 교환 Use Case입니다.

Architecture:
    - UseCase(지휘자): VkCallbackInteractor
    - Services(연주자): UserRegistrar
    - Ports(인프라): OAuthProviderGateway, UsersQueryGateway, TokensCommandGateway,
      SessionTokenIssuer, TransactionManager
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.volunteers.application.auth.dto import SessionTokenResponse, VkCallbackRequest
from apps.volunteers.application.auth.exceptions import AccountCreationError
from apps.volunteers.application.auth.services import build_callback_uri
from apps.volunteers.application.users.dto import CreateUserRequest
from apps.volunteers.domain.entities import Token

if TYPE_CHECKING:
    from apps.volunteers.application.auth.ports import (
        OAuthProfile,
        OAuthProviderGateway,
        SessionTokenIssuer,
        TokensCommandGateway,
    )
    from apps.volunteers.application.common.ports import TransactionManager
    from apps.volunteers.application.users.ports import UsersQueryGateway
    from apps.volunteers.application.users.services import UserRegistrar
    from apps.volunteers.domain.enums import UserRole

logger = logging.getLogger(__name__)

VK_PROFILE_URL_TEMPLATE = "https://vk.com/{domain}"


class VkCallbackInteractor:
    """VK 콜백 Interactor (지휘자).

    Workflow:
        1. 인증 코드 → access token 교환 (OAuthProviderGateway)
        2. vk_id로 사용자 조회, 없으면 프로필 조회 후 생성 (UserRegistrar)
        3. access token 기록 저장 (TokensCommandGateway)
        4. 트랜잭션 커밋
        5. 세션 토큰 발급 (만료 시간은 프로바이더 토큰과 동일)
    """

    def __init__(
        self,
        oauth_provider: "OAuthProviderGateway",
        users_query_gateway: "UsersQueryGateway",
        registrar: "UserRegistrar",
        tokens_gateway: "TokensCommandGateway",
        token_issuer: "SessionTokenIssuer",
        transaction_manager: "TransactionManager",
        redirect_uri: str,
    ) -> None:
        self._oauth_provider = oauth_provider
        self._users_query_gateway = users_query_gateway
        self._registrar = registrar
        self._tokens_gateway = tokens_gateway
        self._token_issuer = token_issuer
        self._tx = transaction_manager
        self._redirect_uri = redirect_uri

    async def execute(self, request: VkCallbackRequest) -> SessionTokenResponse:
        """VK 콜백을 처리합니다.

        Raises:
            OAuthProviderError: VK API 오류
            AccountCreationError: VK 프로필이 비어 있음
            ForbiddenError: admin/master 역할로 신규 가입 시도
            LoginAlreadyExistsError: VK domain이 이미 login으로 사용 중
        """
        redirect_uri = build_callback_uri(self._redirect_uri, request.role)
        tokens = await self._oauth_provider.exchange_code(
            code=request.code,
            redirect_uri=redirect_uri,
        )

        user = await self._users_query_gateway.get_by_vk_id(tokens.user_id)
        is_new_user = user is None

        if user is None:
            profile = await self._oauth_provider.fetch_profile(
                access_token=tokens.access_token,
                provider_user_id=tokens.user_id,
            )
            if profile is None:
                logger.warning(
                    "VK profile is empty, user cannot be created",
                    extra={"vk_id": tokens.user_id},
                )
                raise AccountCreationError()
            user = await self._registrar.register(self._build_user_request(profile, request.role))

        await self._tokens_gateway.add(
            Token(
                token=tokens.access_token,
                expires_in=tokens.expires_in,
                user_id=user.id,
            )
        )
        await self._tx.commit()

        # VK offline 토큰은 expires_in=0 (무기한) → 기본 세션 만료 시간 사용
        issued = self._token_issuer.issue(
            user_id=user.id,
            access_token=tokens.access_token,
            expires_in_seconds=tokens.expires_in if tokens.expires_in > 0 else None,
        )

        logger.info(
            "VK login successful",
            extra={
                "user_id": str(user.id),
                "vk_id": tokens.user_id,
                "is_new_user": is_new_user,
            },
        )

        return SessionTokenResponse(
            user_id=user.id,
            access_token=issued.token,
            expires_at=issued.expires_at,
            is_new_user=is_new_user,
        )

    @staticmethod
    def _build_user_request(profile: "OAuthProfile", role: "UserRole") -> CreateUserRequest:
        return CreateUserRequest(
            login=profile.domain,
            password=None,
            fullname=profile.fullname,
            role=role,
            phone="",
            address=profile.address,
            avatar=profile.photo_max,
            vk=VK_PROFILE_URL_TEMPLATE.format(domain=profile.domain) if profile.domain else None,
            vk_id=profile.provider_user_id,
            coordinates=[],
        )
