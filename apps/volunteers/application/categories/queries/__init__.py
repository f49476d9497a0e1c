"""Categories Queries."""

from apps.volunteers.application.categories.queries.get_categories import GetCategoriesQuery

__all__ = ["GetCategoriesQuery"]
