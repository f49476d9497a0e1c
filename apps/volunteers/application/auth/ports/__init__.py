"""Auth Ports."""

from apps.volunteers.application.auth.ports.oauth_provider_gateway import (
    OAuthProfile,
    OAuthProviderGateway,
    OAuthTokens,
)
from apps.volunteers.application.auth.ports.session_token_issuer import (
    IssuedSessionToken,
    SessionPayload,
    SessionTokenIssuer,
)
from apps.volunteers.application.auth.ports.tokens_gateway import TokensCommandGateway

__all__ = [
    "IssuedSessionToken",
    "OAuthProfile",
    "OAuthProviderGateway",
    "OAuthTokens",
    "SessionPayload",
    "SessionTokenIssuer",
    "TokensCommandGateway",
]
