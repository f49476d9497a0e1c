"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
구체적인 예외가 먼저 매칭되고, 나머지는 DomainError/ApplicationError 핸들러가 처리합니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from apps.volunteers.application.auth.exceptions import (
    AccountCreationError,
    OAuthProviderError,
    UnauthorizedError,
)
from apps.volunteers.application.categories.exceptions import CategoryNotFoundError
from apps.volunteers.application.common.exceptions import ApplicationError
from apps.volunteers.application.contacts.exceptions import ContactNotFoundError
from apps.volunteers.application.users.exceptions import NoChangesProvidedError
from apps.volunteers.domain.exceptions import (
    DomainError,
    ForbiddenError,
    InvalidTokenError,
    LoginAlreadyExistsError,
    TokenExpiredError,
    UserNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# 예외 타입 → (HTTP status, error code)
ERROR_CODE_MAP: dict[type[Exception], tuple[int, str]] = {
    UnauthorizedError: (401, "UNAUTHORIZED"),
    InvalidTokenError: (401, "INVALID_TOKEN"),
    TokenExpiredError: (401, "TOKEN_EXPIRED"),
    ForbiddenError: (403, "FORBIDDEN"),
    UserNotFoundError: (404, "USER_NOT_FOUND"),
    CategoryNotFoundError: (404, "CATEGORY_NOT_FOUND"),
    ContactNotFoundError: (404, "CONTACT_NOT_FOUND"),
    LoginAlreadyExistsError: (400, "LOGIN_ALREADY_EXISTS"),
    AccountCreationError: (400, "ACCOUNT_CREATION_FAILED"),
    NoChangesProvidedError: (400, "NO_CHANGES_PROVIDED"),
    OAuthProviderError: (502, "OAUTH_PROVIDER_ERROR"),
    ValidationError: (422, "VALIDATION_ERROR"),
    DomainError: (400, "DOMAIN_ERROR"),
    ApplicationError: (400, "APPLICATION_ERROR"),
}


def _error_response(exc: DomainError | ApplicationError) -> JSONResponse:
    # MRO 순서대로 가장 구체적인 매핑을 찾음
    for cls in type(exc).__mro__:
        if cls in ERROR_CODE_MAP:
            status_code, code = ERROR_CODE_MAP[cls]
            break
    else:
        status_code, code = 400, "ERROR"

    if status_code >= 500:
        logger.warning("Upstream failure", extra={"code": code, "detail": exc.message})
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "code": code},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return _error_response(exc)

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return _error_response(exc)
