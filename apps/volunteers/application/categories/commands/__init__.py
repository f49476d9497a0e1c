"""Categories Commands."""

from apps.volunteers.application.categories.commands.categories import (
    CreateCategoryInteractor,
    DeleteCategoryInteractor,
    UpdateCategoryInteractor,
)

__all__ = [
    "CreateCategoryInteractor",
    "DeleteCategoryInteractor",
    "UpdateCategoryInteractor",
]
