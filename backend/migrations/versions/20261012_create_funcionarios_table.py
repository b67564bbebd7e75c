"""Create funcionarios table.

Revision ID: 20261012_funcionarios
Revises:
Create Date: 2026-10-12
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "20261012_funcionarios"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "funcionarios",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("nome", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False, unique=True),
        sa.Column("cpf", sa.String(length=14), nullable=False, unique=True),
        sa.Column(
            "perfil",
            sa.String(length=32),
            nullable=False,
            server_default="ROLE_USUARIO",
        ),
        sa.Column("empresa_id", sa.String(length=64), nullable=True),
    )


def downgrade() -> None:
    op.drop_table("funcionarios")
