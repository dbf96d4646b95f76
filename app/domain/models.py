"""Typed domain models shared across runtime layers.

This module provides the ledger item and analytics data contracts passed
between the db, ledger, analytics and api layers.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class ItemType(str, Enum):
    """Supported ledger item kinds."""

    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True)
class HealthStatus:
    """Health response contract used by health-check surfaces.

    Attributes:
        status: Overall status text for service health.
        detail: Additional message suitable for operational diagnostics.
    """

    status: str
    detail: str


@dataclass(frozen=True)
class LedgerItemDraft:
    """Writable ledger item fields used by create and update operations.

    Attributes:
        item_type: Item kind (`income` or `expense`).
        amount: Non-negative currency amount.
        category: Free-text category label.
        date: Offset-aware item timestamp.
    """

    item_type: ItemType
    amount: Decimal
    category: str
    date: datetime


@dataclass(frozen=True)
class LedgerItem:
    """Persisted ledger item record.

    Attributes:
        item_id: Storage-assigned integer identifier.
        item_type: Item kind (`income` or `expense`).
        amount: Non-negative currency amount.
        category: Free-text category label.
        date: Item timestamp in UTC.
        created_at_utc: Row creation timestamp in UTC.
        updated_at_utc: Last modification timestamp in UTC.
    """

    item_id: int
    item_type: ItemType
    amount: Decimal
    category: str
    date: datetime
    created_at_utc: datetime
    updated_at_utc: datetime


@dataclass(frozen=True)
class AnalyticsResult:
    """Descriptive statistics over item amounts in one date range.

    Attributes:
        count: Number of items in range.
        sum: Total amount of included items.
        avg: Arithmetic mean, zero when count is zero.
        median: 50th percentile of included amounts.
        percentile_90: 90th percentile of included amounts (linear interpolation).
    """

    count: int
    sum: Decimal
    avg: Decimal
    median: Decimal
    percentile_90: Decimal
