"""Security Infrastructure."""

from apps.volunteers.infrastructure.security.bcrypt_password_hasher import BcryptPasswordHasher
from apps.volunteers.infrastructure.security.jwt_token_service import JwtTokenService

__all__ = ["BcryptPasswordHasher", "JwtTokenService"]
