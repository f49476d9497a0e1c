"""Auth Application Services."""

from apps.volunteers.application.auth.services.callback_uri import build_callback_uri

__all__ = ["build_callback_uri"]
