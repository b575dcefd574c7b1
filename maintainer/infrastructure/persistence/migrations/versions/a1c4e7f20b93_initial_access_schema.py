"""initial_access_schema

Revision ID: a1c4e7f20b93
Revises:
Create Date: 2026-10-19 09:12:41.508112

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a1c4e7f20b93"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column("status", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("row_version", sa.String(length=32), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "role_options",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=30), nullable=False),
        sa.Column("link", sa.String(length=60), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_uq_role_options_name", "role_options", ["name"], unique=True)
    op.create_index("ix_uq_role_options_link", "role_options", ["link"], unique=True)
    op.create_index("ix_role_options_status", "role_options", ["status"])

    op.create_table(
        "roles",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=30), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_uq_roles_name", "roles", ["name"], unique=True)
    op.create_index("ix_roles_status", "roles", ["status"])

    op.create_table(
        "roles_role_options",
        sa.Column("role_id", sa.Integer(), nullable=False),
        sa.Column("role_option_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["role_id"], ["roles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["role_option_id"], ["role_options.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("role_id", "role_option_id"),
    )

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("dni", sa.String(length=10), nullable=False),
        sa.Column("first_name", sa.String(length=60), nullable=False),
        sa.Column("last_name", sa.String(length=60), nullable=False),
        sa.Column("birth_date", sa.Date(), nullable=False),
        sa.Column("phone", sa.String(length=10), nullable=False),
        sa.Column("username", sa.String(length=60), nullable=False),
        sa.Column("email", sa.String(length=60), nullable=False),
        sa.Column("password", sa.String(length=100), nullable=False),
        sa.Column(
            "active_session",
            sa.Boolean(),
            nullable=False,
            server_default=sa.text("false"),
        ),
        sa.Column("role_id", sa.Integer(), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["role_id"], ["roles.id"]),
    )
    op.create_index("ix_uq_users_dni", "users", ["dni"], unique=True)
    op.create_index("ix_uq_users_email", "users", ["email"], unique=True)
    op.create_index("ix_uq_users_phone", "users", ["phone"], unique=True)
    op.create_index("ix_uq_users_username", "users", ["username"], unique=True)
    op.create_index("ix_users_role_id", "users", ["role_id"])
    op.create_index("ix_users_status", "users", ["status"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("users")
    op.drop_table("roles_role_options")
    op.drop_table("roles")
    op.drop_table("role_options")
