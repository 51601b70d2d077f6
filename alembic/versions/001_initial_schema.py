"""Initial schema - roles, community_groups, wallets, users; seeds the role table.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
import uuid
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ROLE_NAMES = ("ADMIN", "LEADER", "TREASURER", "SECRETARY", "MEMBER")


def upgrade() -> None:
    roles = op.create_table(
        "roles",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(20), nullable=False, unique=True),
    )

    op.create_table(
        "community_groups",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("type", sa.String(10), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "wallets",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "group_id", UUID(as_uuid=True),
            sa.ForeignKey("community_groups.id", ondelete="CASCADE"),
            nullable=False, unique=True,
        ),
        sa.Column("balance", sa.Numeric(14, 2), nullable=False, server_default="0"),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "users",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("full_name", sa.String(150), nullable=False),
        sa.Column("phone", sa.String(30), nullable=True),
        sa.Column("address", sa.Text, nullable=True),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("role_id", UUID(as_uuid=True), sa.ForeignKey("roles.id"), nullable=False),
        sa.Column(
            "community_group_id", UUID(as_uuid=True),
            sa.ForeignKey("community_groups.id"), nullable=False,
        ),
        sa.Column("created_by_id", UUID(as_uuid=True), sa.ForeignKey("users.id"), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_users_community_group_id", "users", ["community_group_id"])
    op.create_index("ix_users_created_at", "users", ["created_at"])

    op.bulk_insert(roles, [{"id": uuid.uuid4(), "name": name} for name in ROLE_NAMES])


def downgrade() -> None:
    op.drop_index("ix_users_created_at", table_name="users")
    op.drop_index("ix_users_community_group_id", table_name="users")
    op.drop_table("users")
    op.drop_table("wallets")
    op.drop_table("community_groups")
    op.drop_table("roles")
