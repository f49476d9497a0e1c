"""PostgreSQL Persistence."""
