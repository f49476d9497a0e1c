"""Callback URI helper."""

from __future__ import annotations

from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from apps.volunteers.domain.enums import UserRole


def build_callback_uri(redirect_uri: str, role: UserRole) -> str:
    """콜백 URL에 요청 역할을 role 쿼리 파라미터로 설정합니다.

    로그인 URL 생성과 코드 교환 모두 같은 값을 사용해야 프로바이더가
    redirect_uri 일치 검사를 통과시킵니다.
    """
    parts = urlsplit(redirect_uri)
    query = [(key, value) for key, value in parse_qsl(parts.query) if key != "role"]
    query.append(("role", UserRole(role).value))
    return urlunsplit(parts._replace(query=urlencode(query)))
