"""OAuth Infrastructure."""

from apps.volunteers.infrastructure.oauth.vk import VkOAuthProvider

__all__ = ["VkOAuthProvider"]
