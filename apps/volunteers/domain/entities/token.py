"""Token Entity.

OAuth 교환 시 발급받은 VK access token 기록입니다.
중복 제거나 만료 정리는 하지 않습니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass
class Token:
    """프로바이더 access token 엔티티."""

    token: str
    expires_in: int
    user_id: UUID
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __repr__(self) -> str:
        # 토큰 값은 노출하지 않음
        return f"Token(id={self.id}, user_id={self.user_id}, expires_in={self.expires_in})"
