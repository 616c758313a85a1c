"""initial schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-18

"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "restaurants",
        sa.Column("id", sa.BigInteger(), sa.Identity(always=False), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("address", sa.String(length=255), nullable=True),
        sa.Column("city", sa.String(length=100), nullable=True),
        sa.Column("state", sa.String(length=50), nullable=True),
        sa.Column("telephone", sa.String(length=50), nullable=True),
        sa.Column(
            "seat_capacity",
            sa.Integer(),
            server_default=sa.text("0"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="restaurants_name_key"),
    )

    op.create_table(
        "payments",
        sa.Column("id", sa.BigInteger(), sa.Identity(always=False), nullable=False),
        sa.Column("type", sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("type", name="payments_type_key"),
    )

    op.create_table(
        "menus",
        sa.Column("id", sa.BigInteger(), sa.Identity(always=False), nullable=False),
        sa.Column("dish", sa.String(length=255), nullable=False),
        sa.Column(
            "price",
            sa.Float(),
            server_default=sa.text("0"),
            nullable=False,
        ),
        sa.Column("restaurant_id", sa.BigInteger(), nullable=False),
        sa.ForeignKeyConstraint(
            ["restaurant_id"],
            ["restaurants.id"],
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_index(
        "idx_menus_restaurant_id",
        "menus",
        ["restaurant_id"],
        unique=False,
    )

    op.create_table(
        "restaurantpayments",
        sa.Column("restaurant_id", sa.BigInteger(), nullable=False),
        sa.Column("payment_id", sa.BigInteger(), nullable=False),
        sa.ForeignKeyConstraint(
            ["restaurant_id"],
            ["restaurants.id"],
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["payment_id"],
            ["payments.id"],
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("restaurant_id", "payment_id"),
    )


def downgrade() -> None:
    op.drop_table("restaurantpayments")
    op.drop_index("idx_menus_restaurant_id", table_name="menus")
    op.drop_table("menus")
    op.drop_table("payments")
    op.drop_table("restaurants")
