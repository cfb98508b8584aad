"""Create countries, cities and places tables.

A place references either a city or a country through two nullable foreign
keys. Exactly one is expected to be set; the schema does not check it.

Revision ID: 001
Revises:
Create Date: 2023-03-03
"""

import sqlalchemy as sa
from alembic import op

revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "countries",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_countries"),
        sa.UniqueConstraint("name", name="uq_countries_name"),
    )
    op.create_table(
        "cities",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("country_id", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_cities"),
        sa.UniqueConstraint("name", name="uq_cities_name"),
        sa.ForeignKeyConstraint(
            ["country_id"],
            ["countries.id"],
            name="fk_cities_country_id_countries",
            ondelete="SET NULL",
            onupdate="CASCADE",
        ),
    )
    op.create_table(
        "places",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("city_id", sa.Integer(), nullable=True),
        sa.Column("country_id", sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_places"),
        sa.ForeignKeyConstraint(
            ["city_id"],
            ["cities.id"],
            name="fk_places_city_id_cities",
            ondelete="SET NULL",
            onupdate="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["country_id"],
            ["countries.id"],
            name="fk_places_country_id_countries",
            ondelete="SET NULL",
            onupdate="CASCADE",
        ),
    )
    op.create_index("ix_places_city_id", "places", ["city_id"])
    op.create_index("ix_places_country_id", "places", ["country_id"])


def downgrade() -> None:
    op.drop_index("ix_places_country_id", table_name="places")
    op.drop_index("ix_places_city_id", table_name="places")
    op.drop_table("places")
    op.drop_table("cities")
    op.drop_table("countries")
