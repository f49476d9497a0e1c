"""Common Ports."""

from apps.volunteers.application.common.ports.password_hasher import PasswordHasher
from apps.volunteers.application.common.ports.transaction_manager import TransactionManager

__all__ = ["PasswordHasher", "TransactionManager"]
