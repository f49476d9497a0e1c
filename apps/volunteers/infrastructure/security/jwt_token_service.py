"""JWT Token Service.

SessionTokenIssuer 포트의 구현체입니다.
"""

from __future__ import annotations

import time
import uuid
from datetime import timedelta
from typing import Any

from jose import ExpiredSignatureError, JWTError, jwt

from apps.volunteers.application.auth.ports import IssuedSessionToken, SessionPayload
from apps.volunteers.domain.exceptions.auth import InvalidTokenError, TokenExpiredError


class JwtTokenService:
    """JWT 세션 토큰 서비스.

    페이로드: {"sub": user_id, "accessToken": VK access token (선택), "iat", "exp"}
    """

    def __init__(
        self,
        *,
        secret_key: str,
        algorithm: str = "HS256",
        default_expire_minutes: int = 60 * 24,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._default_expire = timedelta(minutes=default_expire_minutes)

    def _now_timestamp(self) -> int:
        """현재 UTC Unix timestamp 반환."""
        return int(time.time())

    def issue(
        self,
        *,
        user_id: uuid.UUID,
        access_token: str | None = None,
        expires_in_seconds: int | None = None,
    ) -> IssuedSessionToken:
        now = self._now_timestamp()
        lifetime = expires_in_seconds or int(self._default_expire.total_seconds())
        expires_at = now + lifetime

        payload: dict[str, Any] = {
            "sub": str(user_id),
            "iat": now,
            "exp": expires_at,
        }
        if access_token:
            payload["accessToken"] = access_token

        token = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return IssuedSessionToken(token=token, expires_at=expires_at)

    def decode(self, token: str) -> SessionPayload:
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except ExpiredSignatureError as e:
            raise TokenExpiredError() from e
        except JWTError as e:
            raise InvalidTokenError(str(e)) from e

        try:
            user_id = uuid.UUID(payload["sub"])
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidTokenError("Invalid token subject") from e

        return SessionPayload(
            user_id=user_id,
            exp=int(payload.get("exp", 0)),
            access_token=payload.get("accessToken"),
        )
