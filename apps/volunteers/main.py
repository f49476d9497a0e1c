"""Volunteers API - FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.volunteers.infrastructure.persistence_postgres.mappings import start_all_mappers
from apps.volunteers.infrastructure.persistence_postgres.session import dispose_engine
from apps.volunteers.presentation.http.controllers import root_router
from apps.volunteers.presentation.http.errors import register_exception_handlers
from apps.volunteers.setup.config import get_settings
from apps.volunteers.setup.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 수명주기 관리."""
    # Startup
    setup_logging(
        settings.log_level,
        settings.log_format,
        service_name=settings.app_name,
        environment=settings.environment,
    )
    logger.info(
        "Starting application",
        extra={"app_name": settings.app_name, "environment": settings.environment},
    )

    yield

    # Shutdown
    await dispose_engine()
    logger.info("Shutting down application", extra={"app_name": settings.app_name})


def create_app() -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    # ORM 매핑은 라우터가 엔티티를 조회하기 전에 완료되어야 함
    start_all_mappers()

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        description="Volunteer/recipient coordination API",
        docs_url=f"{settings.api_v1_prefix}/docs",
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(root_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.volunteers.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.environment == "local",
    )
