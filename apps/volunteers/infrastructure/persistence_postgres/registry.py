"""SQLAlchemy mapper registry."""

from sqlalchemy import MetaData
from sqlalchemy.orm import registry

metadata = MetaData(schema="volunteers")
mapper_registry = registry(metadata=metadata)
