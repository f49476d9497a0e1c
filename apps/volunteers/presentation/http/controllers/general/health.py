"""Health Check Controller."""

from fastapi import APIRouter

from apps.volunteers.setup.config import get_settings

router = APIRouter()


@router.get("/health", summary="Liveness probe")
async def health() -> dict[str, str]:
    settings = get_settings()
    return {"status": "healthy", "service": settings.app_name}
