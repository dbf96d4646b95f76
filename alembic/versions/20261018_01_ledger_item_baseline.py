"""Ledger item baseline

Revision ID: 20261018_01
Revises: None
Create Date: 2026-10-18
"""
# pylint: disable=no-member,invalid-name,wrong-import-order

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "20261018_01"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "ledger_item",
        sa.Column("ledger_item_id", sa.BigInteger(), sa.Identity(always=False), primary_key=True),
        sa.Column("item_type", sa.Text(), nullable=False),
        sa.Column("amount", sa.Numeric(18, 2), nullable=False),
        sa.Column("category", sa.Text(), nullable=False),
        sa.Column("item_date_utc", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_at_utc", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.Column("updated_at_utc", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.CheckConstraint("item_type in ('income', 'expense')", name="ck_ledger_item_item_type"),
        sa.CheckConstraint("amount >= 0", name="ck_ledger_item_amount_non_negative"),
        sa.CheckConstraint("length(btrim(category)) > 0", name="ck_ledger_item_category_not_blank"),
    )
    op.create_index(
        "ix_ledger_item_date_item",
        "ledger_item",
        [sa.text("item_date_utc desc"), sa.text("ledger_item_id desc")],
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index("ix_ledger_item_date_item", table_name="ledger_item")
    op.drop_table("ledger_item")
