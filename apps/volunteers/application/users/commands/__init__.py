"""Users Commands."""

from apps.volunteers.application.users.commands.block_user import BlockUserInteractor
from apps.volunteers.application.users.commands.change_permissions import (
    ChangeAdminPermissionsInteractor,
)
from apps.volunteers.application.users.commands.change_status import (
    ChangeStatusInteractor,
    GiveKeyInteractor,
)
from apps.volunteers.application.users.commands.create_user import (
    CreateAdminInteractor,
    CreateUserInteractor,
)
from apps.volunteers.application.users.commands.delete_user import DeleteUserInteractor
from apps.volunteers.application.users.commands.update_user import UpdateUserInteractor

__all__ = [
    "BlockUserInteractor",
    "ChangeAdminPermissionsInteractor",
    "ChangeStatusInteractor",
    "CreateAdminInteractor",
    "CreateUserInteractor",
    "DeleteUserInteractor",
    "GiveKeyInteractor",
    "UpdateUserInteractor",
]
