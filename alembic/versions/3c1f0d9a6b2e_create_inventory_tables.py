"""Create inventory tables

Revision ID: 3c1f0d9a6b2e
Revises:
Create Date: 2026-10-19 09:12:40.118204

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "3c1f0d9a6b2e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ENUMS = {
    "odo_unit": ("MILES", "KILOMETERS"),
    "currency_code": ("GBP", "EUR", "USD"),
    "transmission": ("MANUAL", "AUTOMATIC"),
    "fuel_type": ("PETROL", "DIESEL", "ELECTRIC", "HYBRID"),
    "body_type": ("SEDAN", "HATCHBACK", "SUV", "COUPE", "CONVERTIBLE", "WAGON"),
    "colour": (
        "BLACK",
        "BLUE",
        "BROWN",
        "GOLD",
        "GREEN",
        "GREY",
        "ORANGE",
        "PINK",
        "PURPLE",
        "RED",
        "SILVER",
        "WHITE",
        "YELLOW",
    ),
    "ulez_compliance": ("EXEMPT", "NON_EXEMPT"),
    "classified_status": ("LIVE", "DRAFT", "SOLD"),
}


def _enum(name: str) -> sa.Enum:
    return sa.Enum(*ENUMS[name], name=name)


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "makes",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=50), nullable=False, unique=True),
        sa.Column("image", sa.String(length=255), nullable=True),
    )
    op.create_table(
        "models",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column(
            "make_id",
            sa.Integer(),
            sa.ForeignKey("makes.id", ondelete="CASCADE"),
            nullable=False,
        ),
    )
    op.create_index("ix_models_make_id", "models", ["make_id"])
    op.create_table(
        "model_variants",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column(
            "model_id",
            sa.Integer(),
            sa.ForeignKey("models.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("year_start", sa.Integer(), nullable=False),
        sa.Column("year_end", sa.Integer(), nullable=False),
    )
    op.create_index("ix_model_variants_model_id", "model_variants", ["model_id"])

    op.create_table(
        "classifieds",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("price", sa.Integer(), nullable=False),
        sa.Column("odo_reading", sa.Integer(), nullable=False),
        sa.Column("doors", sa.Integer(), nullable=False),
        sa.Column("seats", sa.Integer(), nullable=False),
        sa.Column("odo_unit", _enum("odo_unit"), nullable=False),
        sa.Column("currency", _enum("currency_code"), nullable=False),
        sa.Column("transmission", _enum("transmission"), nullable=False),
        sa.Column("fuel_type", _enum("fuel_type"), nullable=False),
        sa.Column("body_type", _enum("body_type"), nullable=False),
        sa.Column("colour", _enum("colour"), nullable=False),
        sa.Column("ulez_compliance", _enum("ulez_compliance"), nullable=False),
        sa.Column("status", _enum("classified_status"), nullable=False),
        sa.Column("make_id", sa.Integer(), sa.ForeignKey("makes.id"), nullable=False),
        sa.Column("model_id", sa.Integer(), sa.ForeignKey("models.id"), nullable=False),
        sa.Column(
            "model_variant_id",
            sa.Integer(),
            sa.ForeignKey("model_variants.id"),
            nullable=True,
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index("ix_classifieds_status", "classifieds", ["status"])
    op.create_index("ix_classifieds_make_id", "classifieds", ["make_id"])
    op.create_index("ix_classifieds_model_id", "classifieds", ["model_id"])
    op.create_index("ix_classifieds_model_variant_id", "classifieds", ["model_variant_id"])

    op.create_table(
        "images",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "classified_id",
            sa.Integer(),
            sa.ForeignKey("classifieds.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("src", sa.Text(), nullable=False),
        sa.Column("alt", sa.String(length=255), nullable=False),
    )
    op.create_index("ix_images_classified_id", "images", ["classified_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("images")
    op.drop_table("classifieds")
    op.drop_table("model_variants")
    op.drop_table("models")
    op.drop_table("makes")
    for name in ENUMS:
        sa.Enum(name=name).drop(op.get_bind(), checkfirst=True)
