"""Categories Ports."""

from apps.volunteers.application.categories.ports.categories_gateway import CategoriesGateway

__all__ = ["CategoriesGateway"]
