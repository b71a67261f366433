"""Create users and sweets tables.

Revision ID: 20251019000000
Revises:
Create Date: 2025-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20251019000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=32), nullable=False, server_default="USER"),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_users")),
    )
    op.create_index(op.f("ix_users_username"), "users", ["username"], unique=True)

    op.create_table(
        "sweets",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("category", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("price", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False, server_default="0"),
        sa.CheckConstraint("quantity >= 0", name=op.f("ck_sweets_quantity_non_negative")),
        sa.CheckConstraint("price >= 0", name=op.f("ck_sweets_price_non_negative")),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_sweets")),
    )
    op.create_index(op.f("ix_sweets_name"), "sweets", ["name"], unique=False)
    op.create_index(op.f("ix_sweets_category"), "sweets", ["category"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_sweets_category"), table_name="sweets")
    op.drop_index(op.f("ix_sweets_name"), table_name="sweets")
    op.drop_table("sweets")
    op.drop_index(op.f("ix_users_username"), table_name="users")
    op.drop_table("users")
