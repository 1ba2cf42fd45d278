"""Create place class and place tables.

Revision ID: 0001_world_tables
Revises:
Create Date: 2026-10-18

"""

from __future__ import annotations

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "0001_world_tables"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "place_class",
        sa.Column("code", sa.String(32), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("demised_place_class_code", sa.String(32), nullable=True),
        sa.ForeignKeyConstraint(
            ["demised_place_class_code"],
            ["place_class.code"],
            name="fk_place_class_demised_place_class_code_place_class",
        ),
        sa.PrimaryKeyConstraint("code", name="pk_place_class"),
    )
    op.create_table(
        "place_class_attr",
        sa.Column("place_class_code", sa.String(32), nullable=False),
        sa.Column("code", sa.String(32), nullable=False),
        sa.Column("value", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["place_class_code"],
            ["place_class.code"],
            name="fk_place_class_attr_place_class_code_place_class",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("place_class_code", "code", name="pk_place_class_attr"),
    )
    op.create_table(
        "place",
        sa.Column("code", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(), nullable=True),
        sa.Column("place_class_code", sa.String(32), nullable=False),
        sa.ForeignKeyConstraint(
            ["place_class_code"],
            ["place_class.code"],
            name="fk_place_place_class_code_place_class",
        ),
        sa.PrimaryKeyConstraint("code", name="pk_place"),
    )
    op.create_table(
        "place_attr",
        sa.Column("place_code", sa.Integer(), nullable=False),
        sa.Column("code", sa.String(32), nullable=False),
        sa.Column("value", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["place_code"],
            ["place.code"],
            name="fk_place_attr_place_code_place",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("place_code", "code", name="pk_place_attr"),
    )
    op.create_table(
        "place_exit",
        sa.Column("place_code", sa.Integer(), nullable=False),
        sa.Column("direction", sa.String(16), nullable=False),
        sa.Column("target_place_code", sa.Integer(), nullable=False),
        sa.Column("visible", sa.Boolean(), nullable=False),
        sa.Column("opened", sa.Boolean(), nullable=False),
        sa.Column("locked", sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(
            ["place_code"],
            ["place.code"],
            name="fk_place_exit_place_code_place",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("place_code", "direction", name="pk_place_exit"),
    )
    op.create_index("ix_place_exit_target", "place_exit", ["target_place_code"])


def downgrade() -> None:
    op.drop_index("ix_place_exit_target", table_name="place_exit")
    op.drop_table("place_exit")
    op.drop_table("place_attr")
    op.drop_table("place")
    op.drop_table("place_class_attr")
    op.drop_table("place_class")
