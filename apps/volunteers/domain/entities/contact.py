"""Contact Entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from apps.volunteers.domain.exceptions.validation import ValidationError
from apps.volunteers.domain.value_objects.email import Email


@dataclass
class Contact:
    """연락처 엔티티 (이메일 + 소셜 네트워크)."""

    email: str
    social_network: str
    expiration_date: datetime | None = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        self.email = str(Email(self.email))
        if not self.social_network or not self.social_network.strip():
            raise ValidationError("Social network is required")
        self.social_network = self.social_network.strip()
