"""Users Router."""

from fastapi import APIRouter

from apps.volunteers.presentation.http.controllers.users.profile import (
    router as profile_router,
)
from apps.volunteers.presentation.http.controllers.users.state import router as state_router

router = APIRouter()

# profile_router에 빈 경로("")가 있으므로 prefix는 여기서 지정
router.include_router(profile_router, prefix="/users")
router.include_router(state_router, prefix="/users")
