"""create worldometer snapshot tables

Revision ID: c0v1d19a0001
Revises:
Create Date: 2026-10-18 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "c0v1d19a0001"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _snapshot_columns() -> list[sa.Column]:
    return [
        sa.Column("total_cases", sa.Integer(), nullable=True),
        sa.Column("new_cases", sa.Integer(), nullable=True),
        sa.Column("total_deaths", sa.Integer(), nullable=True),
        sa.Column("new_deaths", sa.Integer(), nullable=True),
        sa.Column("total_recovered", sa.Integer(), nullable=True),
        sa.Column("active_cases", sa.Integer(), nullable=True),
        sa.Column("total_cases_per_million_pop", sa.Float(), nullable=True),
        sa.Column("last_updated", sa.DateTime(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "worldometers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("country", sa.String(length=100), nullable=False),
        sa.Column("serious_critical_cases", sa.Integer(), nullable=True),
        *_snapshot_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_worldometers_country_last_updated",
        "worldometers",
        ["country", "last_updated"],
    )

    op.create_table(
        "worldometers_total_sum",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        *_snapshot_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_worldometers_total_sum_last_updated",
        "worldometers_total_sum",
        ["last_updated"],
    )

    op.create_table(
        "apps_countries",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("country_code", sa.String(length=3), nullable=False),
        sa.Column("country_name", sa.String(length=100), nullable=False),
        sa.Column("country_alias", sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("country_alias"),
    )
    op.create_index(
        "ix_apps_countries_country_code", "apps_countries", ["country_code"]
    )


def downgrade() -> None:
    op.drop_index("ix_apps_countries_country_code", table_name="apps_countries")
    op.drop_table("apps_countries")
    op.drop_index(
        "ix_worldometers_total_sum_last_updated", table_name="worldometers_total_sum"
    )
    op.drop_table("worldometers_total_sum")
    op.drop_index("ix_worldometers_country_last_updated", table_name="worldometers")
    op.drop_table("worldometers")
