"""Profile exceptions."""

from apps.volunteers.application.common.exceptions.base import ApplicationError


class NoChangesProvidedError(ApplicationError):
    """변경할 필드가 없음."""

    def __init__(self) -> None:
        super().__init__("No changes provided")
