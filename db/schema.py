from __future__ import annotations

import sqlalchemy as sa


METADATA = sa.MetaData()

skills = sa.Table(
    "skills",
    METADATA,
    sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
    sa.Column("name", sa.Text(), nullable=False),
    sa.Column("sort", sa.Integer(), nullable=False),
)
