"""Auth Dependencies.

FastAPI Depends용 인증/인가 의존성입니다.
세션 토큰은 `Authorization: Bearer <token>` 헤더로 전달됩니다.
"""

from __future__ import annotations

from typing import Any, Callable, Coroutine

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from apps.volunteers.application.auth.exceptions import UnauthorizedError
from apps.volunteers.application.auth.queries import GetCurrentUserQuery
from apps.volunteers.domain.entities import User
from apps.volunteers.domain.enums import UserRole
from apps.volunteers.domain.exceptions import ForbiddenError
from apps.volunteers.setup.dependencies import get_current_user_query

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    query: GetCurrentUserQuery = Depends(get_current_user_query),
) -> User:
    """현재 인증된 사용자 조회.

    Raises:
        UnauthorizedError: 토큰 없음
        InvalidTokenError / TokenExpiredError: 토큰 검증 실패
        ForbiddenError: 차단된 사용자
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Not authenticated")
    return await query.execute(credentials.credentials)


def require_roles(*roles: UserRole) -> Callable[..., Coroutine[Any, Any, User]]:
    """지정한 역할만 허용하는 의존성을 생성합니다."""
    allowed = frozenset(roles)

    async def _dependency(user: User = Depends(get_current_user)) -> User:
        if user.role not in allowed:
            raise ForbiddenError()
        return user

    return _dependency


require_staff = require_roles(UserRole.ADMIN, UserRole.MASTER)
require_master = require_roles(UserRole.MASTER)
