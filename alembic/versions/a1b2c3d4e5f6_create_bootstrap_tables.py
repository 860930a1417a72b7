"""create plugins, node_types and variables tables

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-16 12:00:00.000000

"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a1b2c3d4e5f6"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "plugins",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("status", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.UniqueConstraint("name", name="uq_plugins_name"),
    )
    op.create_index("ix_plugins_id", "plugins", ["id"])

    op.create_table(
        "node_types",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("slug", sa.String(100), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.UniqueConstraint("slug", name="uq_node_types_slug"),
    )
    op.create_index("ix_node_types_id", "node_types", ["id"])

    op.create_table(
        "variables",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("value", sa.Text(), nullable=True),
        sa.UniqueConstraint("name", name="uq_variables_name"),
    )
    op.create_index("ix_variables_id", "variables", ["id"])
    op.create_index("ix_variables_name", "variables", ["name"])


def downgrade() -> None:
    op.drop_index("ix_variables_name", table_name="variables")
    op.drop_index("ix_variables_id", table_name="variables")
    op.drop_table("variables")
    op.drop_index("ix_node_types_id", table_name="node_types")
    op.drop_table("node_types")
    op.drop_index("ix_plugins_id", table_name="plugins")
    op.drop_table("plugins")
