"""initial schema

Revision ID: 001_initial_schema
Revises:
Create Date: 2024-01-01 00:00:00.000000
"""
from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

from alembic import op

revision: str = "001_initial_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

CATEGORIES = (
    "electronics",
    "apparel",
    "home-goods",
    "vehicles",
    "property",
    "hobbies",
    "other",
)


def upgrade() -> None:
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # Marketplace listings
    op.create_table(
        "listings",
        sa.Column(
            "id",
            UUID(as_uuid=True),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column("title", sa.String(512), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        sa.Column("category", sa.String(64), nullable=False),
        sa.Column("image_url", sa.String(2048), nullable=True),
        sa.Column("location", sa.String(256), nullable=True),
        sa.Column("seller_email", sa.String(320), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.CheckConstraint("price >= 0", name="ck_listings_price_non_negative"),
        sa.CheckConstraint(
            "category IN (" + ", ".join(f"'{c}'" for c in CATEGORIES) + ")",
            name="ck_listings_category",
        ),
    )

    op.create_index("ix_listings_created_at", "listings", ["created_at"])
    op.create_index("ix_listings_category", "listings", ["category"])
    op.create_index("ix_listings_seller_email", "listings", ["seller_email"])

    # Buyer/seller messages; listing_id is not a foreign key
    op.create_table(
        "messages",
        sa.Column(
            "id",
            UUID(as_uuid=True),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column("listing_id", UUID(as_uuid=True), nullable=False),
        sa.Column("buyer_email", sa.String(320), nullable=False),
        sa.Column("seller_email", sa.String(320), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
    )
    op.create_index(
        "ix_messages_listing_id_created_at", "messages", ["listing_id", "created_at"]
    )


def downgrade() -> None:
    op.drop_table("messages")
    op.drop_table("listings")
