"""Initial schema and seed data for recordkit

Revision ID: 20261019_000000
Revises: None
Create Date: 2026-10-19 00:00:00.000000

This is the initial migration that creates all data entry tables and seeds the
core plugin. This includes:
- Account tables (users, roles)
- Core plugin registry
- Security incidents

Revision format: YYYYMMDD_HHMMSS_description

"""

from datetime import datetime, timezone
from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20261019_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _meta_columns() -> list:
    """Columns every data entry table starts with."""
    return [
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("created_on", sa.DateTime(), nullable=True),
        sa.Column("created_by", sa.Integer(), nullable=True),
        sa.Column("status", sa.String(16), nullable=True),
    ]


def _meta_indexes(table: str) -> None:
    op.create_index(f"ix_{table}_created_by", table, ["created_by"])
    op.create_index(f"ix_{table}_status", table, ["status"])


def upgrade() -> None:
    """Create all tables and seed initial data."""

    # Create accounts_users table
    op.create_table(
        "accounts_users",
        *_meta_columns(),
        sa.Column("email", sa.String(128), nullable=True),
        sa.Column("nickname", sa.String(64), nullable=True),
        sa.Column("first_names", sa.String(127), nullable=True),
        sa.Column("last_names", sa.String(127), nullable=True),
        sa.Column("password", sa.String(255), nullable=True),
        sa.Column("priority", sa.Integer(), nullable=True),
        sa.Column("is_leader", sa.Boolean(), nullable=False),
        sa.Column("data", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )
    _meta_indexes("accounts_users")

    # Create accounts_roles table
    op.create_table(
        "accounts_roles",
        *_meta_columns(),
        sa.Column("name", sa.String(128), nullable=True),
        sa.Column("seo_name", sa.String(128), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
        sa.UniqueConstraint("seo_name"),
    )
    _meta_indexes("accounts_roles")

    # Create core_plugins table
    op.create_table(
        "core_plugins",
        *_meta_columns(),
        sa.Column("name", sa.String(128), nullable=True),
        sa.Column("seo_name", sa.String(128), nullable=True),
        sa.Column("vendor", sa.String(128), nullable=True),
        sa.Column("class_path", sa.String(1024), nullable=True),
        sa.Column("directory", sa.String(255), nullable=True),
        sa.Column("priority", sa.Integer(), nullable=False),
        sa.Column("menu_priority", sa.Integer(), nullable=False),
        sa.Column("menu_enabled", sa.Boolean(), nullable=False),
        sa.Column("commands_enabled", sa.Boolean(), nullable=False),
        sa.Column("web_enabled", sa.Boolean(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
        sa.UniqueConstraint("seo_name"),
    )
    _meta_indexes("core_plugins")

    # Create security_incidents table
    op.create_table(
        "security_incidents",
        *_meta_columns(),
        sa.Column("type", sa.String(64), nullable=True),
        sa.Column("severity", sa.String(16), nullable=True),
        sa.Column("title", sa.String(255), nullable=True),
        sa.Column("body", sa.Text(), nullable=True),
        sa.Column("details", sa.Text(), nullable=True),
        sa.Column("url", sa.String(2048), nullable=True),
        sa.Column("exception", sa.Text(), nullable=True),
        sa.Column("data", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    _meta_indexes("security_incidents")
    op.create_index("ix_security_incidents_severity", "security_incidents", ["severity"])

    # Seed the core plugin, it always loads first and can never be disabled
    plugins = sa.table(
        "core_plugins",
        sa.column("created_on", sa.DateTime()),
        sa.column("name", sa.String()),
        sa.column("seo_name", sa.String()),
        sa.column("vendor", sa.String()),
        sa.column("priority", sa.Integer()),
        sa.column("menu_priority", sa.Integer()),
        sa.column("menu_enabled", sa.Boolean()),
        sa.column("commands_enabled", sa.Boolean()),
        sa.column("web_enabled", sa.Boolean()),
        sa.column("description", sa.Text()),
    )
    op.bulk_insert(
        plugins,
        [
            {
                "created_on": datetime.now(timezone.utc).replace(tzinfo=None),
                "name": "Phoundation",
                "seo_name": "phoundation",
                "vendor": "Phoundation",
                "priority": 0,
                "menu_priority": 0,
                "menu_enabled": True,
                "commands_enabled": True,
                "web_enabled": True,
                "description": "Core plugin",
            }
        ],
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table("security_incidents")
    op.drop_table("core_plugins")
    op.drop_table("accounts_roles")
    op.drop_table("accounts_users")
