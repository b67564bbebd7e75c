"""Create lancamentos table.

Revision ID: 20261012_lancamentos
Revises: 20261012_funcionarios
Create Date: 2026-10-12
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "20261012_lancamentos"
down_revision = "20261012_funcionarios"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "lancamentos",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("data", sa.DateTime(timezone=False), nullable=False),
        sa.Column("tipo", sa.String(length=32), nullable=False),
        sa.Column(
            "funcionario_id",
            sa.String(length=64),
            sa.ForeignKey("funcionarios.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("descricao", sa.Text(), nullable=True),
        sa.Column("localizacao", sa.Text(), nullable=True),
    )
    op.create_index(
        "ix_lancamentos_funcionario_id_data",
        "lancamentos",
        ["funcionario_id", "data"],
    )


def downgrade() -> None:
    op.drop_index("ix_lancamentos_funcionario_id_data", table_name="lancamentos")
    op.drop_table("lancamentos")
