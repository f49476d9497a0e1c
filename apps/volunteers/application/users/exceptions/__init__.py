"""Users exceptions.

사용자 관련 예외는 도메인 규칙이므로 domain 계층에 정의되어 있습니다.
"""

from apps.volunteers.domain.exceptions.user import (
    ForbiddenError,
    LoginAlreadyExistsError,
    UserNotFoundError,
)
from apps.volunteers.application.users.exceptions.profile import NoChangesProvidedError

__all__ = [
    "ForbiddenError",
    "LoginAlreadyExistsError",
    "NoChangesProvidedError",
    "UserNotFoundError",
]
