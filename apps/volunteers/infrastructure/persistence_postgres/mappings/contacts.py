"""Contacts ORM Mapping."""

from sqlalchemy import Column, DateTime, String, Table, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from apps.volunteers.infrastructure.persistence_postgres.registry import mapper_registry

contacts_table = Table(
    "contacts",
    mapper_registry.metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("email", String(320), nullable=False),
    Column("social_network", Text, nullable=False),
    Column("expiration_date", DateTime(timezone=True)),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)


def start_contacts_mapper() -> None:
    from apps.volunteers.domain.entities.contact import Contact

    if hasattr(Contact, "__mapper__"):
        return

    mapper_registry.map_imperatively(Contact, contacts_table)
