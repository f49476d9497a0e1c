"""API v1 Router."""

from fastapi import APIRouter

from apps.volunteers.presentation.http.controllers.admins.router import router as admins_router
from apps.volunteers.presentation.http.controllers.auth.router import router as auth_router
from apps.volunteers.presentation.http.controllers.categories.router import (
    router as categories_router,
)
from apps.volunteers.presentation.http.controllers.contacts.router import (
    router as contacts_router,
)
from apps.volunteers.presentation.http.controllers.general.health import (
    router as health_router,
)
from apps.volunteers.presentation.http.controllers.users.router import router as users_router

router = APIRouter()

router.include_router(auth_router, prefix="/auth", tags=["auth"])
router.include_router(users_router, tags=["users"])
router.include_router(admins_router, prefix="/admins", tags=["admins"])
router.include_router(categories_router, prefix="/categories", tags=["categories"])
router.include_router(contacts_router, prefix="/contacts", tags=["contacts"])
router.include_router(health_router, tags=["general"])
