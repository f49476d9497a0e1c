"""Auth HTTP Schemas."""

from uuid import UUID

from pydantic import BaseModel, Field

from apps.volunteers.domain.enums import UserRole


class LoginUrlResponse(BaseModel):
    """VK 인증 URL 응답."""

    authorization_url: str = Field(..., description="VK 인증 URL")


class SignUpRequest(BaseModel):
    """회원가입 요청."""

    login: str = Field(..., min_length=3, max_length=64, description="로그인")
    password: str = Field(..., min_length=6, max_length=128, description="비밀번호")
    fullname: str = Field(..., min_length=1, max_length=200, description="이름")
    role: UserRole = Field(..., description="역할 (recipient, volunteer)")
    phone: str | None = Field(None, max_length=20)
    address: str | None = None
    avatar: str | None = None
    vk: str | None = None
    coordinates: list[float] = Field(default_factory=list)


class SignInRequest(BaseModel):
    """login/password 로그인 요청."""

    login: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class SessionTokenResponse(BaseModel):
    """세션 토큰 응답."""

    user_id: UUID
    access_token: str
    token_type: str = "bearer"
    expires_at: int = Field(..., description="만료 시각 (unix timestamp)")
    is_new_user: bool = False

    model_config = {"from_attributes": True}
