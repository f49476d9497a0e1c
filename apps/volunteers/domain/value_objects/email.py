"""Email Value Object."""

from __future__ import annotations

import re
from dataclasses import dataclass

from apps.volunteers.domain.exceptions.validation import InvalidEmailError

EMAIL_PATTERN = re.compile(
    r"[a-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[a-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@(?:[a-z0-9](?:[a-z0-9-]*[a-z0-9])?\.)+[a-z0-9](?:[a-z0-9-]*[a-z0-9])?",
    re.IGNORECASE,
)


@dataclass(frozen=True, slots=True)
class Email:
    """이메일 Value Object.

    자기 검증을 수행하여 항상 유효한 이메일만 존재합니다.
    """

    value: str

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        if not self.value:
            raise InvalidEmailError("Email cannot be empty")
        if len(self.value) > 320:
            raise InvalidEmailError("Email too long (max 320 characters)")
        if not EMAIL_PATTERN.fullmatch(self.value):
            raise InvalidEmailError(f"{self.value} is not a valid email")

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        local, domain = self.value.split("@", 1)
        return f"Email({local[:2]}***@{domain})"
