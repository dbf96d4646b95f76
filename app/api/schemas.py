"""Request payload models for ledger item endpoints."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from app.domain import LedgerItemDraft


class LedgerItemPayload(BaseModel):
    """JSON body accepted by item create and update endpoints.

    Field values are only shape-checked here; item invariants are enforced by the
    domain validator so every write path reports them the same way.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    item_type: str = Field(alias="type")
    amount: Decimal
    category: str
    date: datetime

    def to_draft(self) -> LedgerItemDraft:
        """Convert payload to a domain draft.

        Returns:
            LedgerItemDraft: Unvalidated draft carrying payload values.
        """

        return LedgerItemDraft(
            item_type=self.item_type,
            amount=self.amount,
            category=self.category,
            date=self.date,
        )
