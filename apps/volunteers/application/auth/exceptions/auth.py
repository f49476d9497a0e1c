"""Auth Exceptions."""

from apps.volunteers.application.common.exceptions.base import ApplicationError


class UnauthorizedError(ApplicationError):
    """인증 실패 (잘못된 자격 증명)."""

    def __init__(self, reason: str = "Invalid login or password") -> None:
        super().__init__(reason)


class AccountCreationError(ApplicationError):
    """OAuth 프로필이 비어 있어 계정을 생성할 수 없음."""

    def __init__(self, reason: str = "User account cannot be created") -> None:
        super().__init__(reason)


class OAuthProviderError(ApplicationError):
    """OAuth 프로바이더 오류."""

    def __init__(self, provider: str, reason: str) -> None:
        self.provider = provider
        super().__init__(f"OAuth provider error ({provider}): {reason}")
