"""create skills

Revision ID: 0001_create_skills
Revises: None
Create Date: 2026-10-19
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "0001_create_skills"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # No unique constraint on name: re-running the seed duplicates rows.
    op.create_table(
        "skills",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("sort", sa.Integer(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("skills")
