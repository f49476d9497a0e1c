"""Tokens ORM Mapping."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Table, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from apps.volunteers.infrastructure.persistence_postgres.registry import mapper_registry

tokens_table = Table(
    "tokens",
    mapper_registry.metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("token", Text, nullable=False),
    Column("expires_in", Integer, nullable=False),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("volunteers.users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)


def start_tokens_mapper() -> None:
    from apps.volunteers.domain.entities.token import Token

    if hasattr(Token, "__mapper__"):
        return

    mapper_registry.map_imperatively(Token, tokens_table)
