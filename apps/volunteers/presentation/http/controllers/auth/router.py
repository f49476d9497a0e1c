"""Auth Router.

인증 관련 엔드포인트를 통합합니다.
"""

from fastapi import APIRouter

from apps.volunteers.presentation.http.controllers.auth.credentials import (
    router as credentials_router,
)
from apps.volunteers.presentation.http.controllers.auth.vk import router as vk_router

router = APIRouter()

router.include_router(vk_router)
router.include_router(credentials_router)
