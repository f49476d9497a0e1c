"""Auth Commands."""

from apps.volunteers.application.auth.commands.build_login_url import BuildLoginUrlInteractor
from apps.volunteers.application.auth.commands.sign_in import SignInInteractor
from apps.volunteers.application.auth.commands.vk_callback import VkCallbackInteractor

__all__ = [
    "BuildLoginUrlInteractor",
    "SignInInteractor",
    "VkCallbackInteractor",
]
