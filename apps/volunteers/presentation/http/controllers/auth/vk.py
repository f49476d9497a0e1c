"""VK OAuth Controller.

VK 인증 URL 생성 및 콜백 처리 엔드포인트입니다.
"""

import logging

from fastapi import APIRouter, Depends, Query

from apps.volunteers.application.auth.commands import (
    BuildLoginUrlInteractor,
    VkCallbackInteractor,
)
from apps.volunteers.application.auth.dto import LoginUrlRequest, VkCallbackRequest
from apps.volunteers.domain.enums import UserRole
from apps.volunteers.presentation.http.schemas.auth import (
    LoginUrlResponse,
    SessionTokenResponse,
)
from apps.volunteers.setup.dependencies import (
    get_build_login_url_interactor,
    get_vk_callback_interactor,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/vk",
    response_model=LoginUrlResponse,
    summary="VK 인증 URL 생성",
)
async def vk_login_url(
    role: UserRole = Query(..., description="가입 시 부여할 역할"),
    display: str = Query("page"),
    scope: str = Query("offline"),
    response_type: str = Query("code"),
    interactor: BuildLoginUrlInteractor = Depends(get_build_login_url_interactor),
) -> LoginUrlResponse:
    """VK 인증 URL을 반환합니다.

    요청한 역할은 콜백 URL의 `role` 쿼리 파라미터로 전달되어
    신규 사용자 생성 시 사용됩니다.
    """
    result = interactor.execute(
        LoginUrlRequest(role=role, display=display, scope=scope, response_type=response_type)
    )
    return LoginUrlResponse(authorization_url=result.authorization_url)


@router.get(
    "/vk/callback",
    response_model=SessionTokenResponse,
    summary="VK 콜백 처리",
)
async def vk_callback(
    code: str = Query(..., description="VK 인증 코드"),
    role: UserRole = Query(..., description="인증 URL에 포함된 역할"),
    interactor: VkCallbackInteractor = Depends(get_vk_callback_interactor),
) -> SessionTokenResponse:
    """VK 콜백을 처리합니다.

    1. 인증 코드로 토큰 교환
    2. 사용자 조회, 없으면 프로필로 생성
    3. 세션 토큰 발급
    """
    result = await interactor.execute(VkCallbackRequest(code=code, role=role))
    return SessionTokenResponse.model_validate(result)
