"""Categories ORM Mapping."""

from sqlalchemy import Column, DateTime, Integer, Table, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from apps.volunteers.infrastructure.persistence_postgres.registry import mapper_registry

categories_table = Table(
    "categories",
    mapper_registry.metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", Text, nullable=False),
    Column("points", Integer, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)


def start_categories_mapper() -> None:
    from apps.volunteers.domain.entities.category import Category

    if hasattr(Category, "__mapper__"):
        return

    mapper_registry.map_imperatively(Category, categories_table)
