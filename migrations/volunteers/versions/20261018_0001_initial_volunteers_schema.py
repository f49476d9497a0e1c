"""Initial volunteers schema.

Revision ID: 0001
Revises: None
Create Date: 2026-10-18

Schema: volunteers.*
- volunteers.users
- volunteers.tokens (users.id FK, ON DELETE CASCADE)
- volunteers.categories
- volunteers.contacts
"""

from typing import Sequence

from alembic import op

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create volunteers schema tables.

    Note: IF NOT EXISTS로 기존 테이블 보존
    """
    op.execute("CREATE SCHEMA IF NOT EXISTS volunteers")

    # ============================================
    # volunteers.users 테이블
    # role/status는 VARCHAR + CHECK (native enum 미사용)
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS volunteers.users (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            login TEXT,
            password TEXT,
            fullname TEXT NOT NULL,
            role VARCHAR(9) NOT NULL,
            status VARCHAR(11) NOT NULL DEFAULT 'unconfirmed',
            is_blocked BOOLEAN NOT NULL DEFAULT false,
            vk_id BIGINT,
            vk TEXT,
            phone VARCHAR(20),
            address TEXT,
            avatar TEXT,
            coordinates DOUBLE PRECISION[] NOT NULL DEFAULT '{}',
            permissions TEXT[] NOT NULL DEFAULT '{}',
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),

            CONSTRAINT uq_users_login UNIQUE (login),
            CONSTRAINT uq_users_vk_id UNIQUE (vk_id),
            CONSTRAINT ck_users_role
                CHECK (role IN ('recipient', 'volunteer', 'admin', 'master')),
            CONSTRAINT ck_users_status
                CHECK (status IN ('unconfirmed', 'confirmed', 'activated'))
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS idx_users_fullname
        ON volunteers.users(fullname)
    """)

    # ============================================
    # volunteers.tokens 테이블
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS volunteers.tokens (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            token TEXT NOT NULL,
            expires_in INTEGER NOT NULL,
            user_id UUID NOT NULL,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),

            CONSTRAINT fk_tokens_user
                FOREIGN KEY (user_id) REFERENCES volunteers.users(id) ON DELETE CASCADE
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS idx_tokens_user_id
        ON volunteers.tokens(user_id)
    """)

    # ============================================
    # volunteers.categories / contacts 테이블
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS volunteers.categories (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            title TEXT NOT NULL,
            points INTEGER NOT NULL,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),

            CONSTRAINT ck_categories_title_length
                CHECK (char_length(title) BETWEEN 2 AND 100),
            CONSTRAINT ck_categories_points_positive CHECK (points > 0)
        )
    """)
    op.execute("""
        CREATE TABLE IF NOT EXISTS volunteers.contacts (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            email VARCHAR(320) NOT NULL,
            social_network TEXT NOT NULL,
            expiration_date TIMESTAMPTZ,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        )
    """)


def downgrade() -> None:
    """Drop volunteers schema tables."""
    op.execute("DROP TABLE IF EXISTS volunteers.contacts")
    op.execute("DROP TABLE IF EXISTS volunteers.categories")
    op.execute("DROP TABLE IF EXISTS volunteers.tokens")
    op.execute("DROP TABLE IF EXISTS volunteers.users")
