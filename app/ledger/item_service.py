"""Ledger item use-case service.

The service validates drafts, stamps audit timestamps, delegates storage to the
db-layer repository and runs range analytics through the analytics port.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from app.analytics import AnalyticsAggregator, AnalyticsPort
from app.db import LedgerItemRepositoryPort
from app.domain import (
    AnalyticsResult,
    ItemNotFoundError,
    LedgerItem,
    LedgerItemDraft,
    domain_normalize_timestamp_utc,
    domain_validate_item_draft,
    domain_validate_range,
)

logger = logging.getLogger(__name__)


def _ledger_utc_now() -> datetime:
    return datetime.now(timezone.utc)


class LedgerItemService:
    """Create, read, update, delete and analyze ledger items."""

    def __init__(
        self,
        repository: LedgerItemRepositoryPort,
        analytics: AnalyticsPort | None = None,
        clock: Callable[[], datetime] = _ledger_utc_now,
    ):
        """Initialize service dependencies.

        Args:
            repository: DB-layer ledger item repository.
            analytics: Optional analytics implementation, defaults to `AnalyticsAggregator`.
            clock: UTC clock used for audit timestamps.

        Raises:
            ValueError: Raised when repository is invalid.
        """

        if repository is None:
            raise ValueError("repository must not be None")
        self._repository = repository
        self._analytics = analytics or AnalyticsAggregator()
        self._clock = clock

    def ledger_item_create(self, draft: LedgerItemDraft) -> LedgerItem:
        """Validate and persist one new item.

        Args:
            draft: Candidate item fields.

        Returns:
            LedgerItem: Stored item with assigned id.

        Raises:
            ItemValidationError: Raised when draft violates item invariants.
            RuntimeError: Raised when persistence fails.
        """

        normalized_draft = domain_validate_item_draft(draft)
        now_utc = self._clock()
        created_item = self._repository.db_ledger_item_insert(
            draft=normalized_draft,
            created_at_utc=now_utc,
            updated_at_utc=now_utc,
        )
        logger.info(
            "ledger.item.create id=%s type=%s category=%s",
            created_item.item_id,
            created_item.item_type.value,
            created_item.category,
        )
        return created_item

    def ledger_item_get(self, item_id: int) -> LedgerItem:
        """Fetch one item.

        Args:
            item_id: Item identifier.

        Returns:
            LedgerItem: Matching item.

        Raises:
            ItemNotFoundError: Raised when no item has this id.
        """

        item = self._repository.db_ledger_item_get_by_id(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        return item

    def ledger_item_list(
        self,
        date_from: datetime | None = None,
        date_to: datetime | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[LedgerItem]:
        """List items with optional inclusive date bounds.

        Args:
            date_from: Optional inclusive lower bound.
            date_to: Optional inclusive upper bound.
            limit: Max rows to return.
            offset: Rows to skip.

        Returns:
            list[LedgerItem]: Items ordered newest first.

        Raises:
            InvalidRangeError: Raised when both bounds are given and reversed.
            ValueError: Raised when a bound is offset-naive or pagination is invalid.
        """

        normalized_from = None if date_from is None else domain_normalize_timestamp_utc(date_from)
        normalized_to = None if date_to is None else domain_normalize_timestamp_utc(date_to)
        if normalized_from is not None and normalized_to is not None:
            domain_validate_range(normalized_from, normalized_to)

        return self._repository.db_ledger_item_list(
            date_from=normalized_from,
            date_to=normalized_to,
            limit=limit,
            offset=offset,
        )

    def ledger_item_update(self, item_id: int, draft: LedgerItemDraft) -> LedgerItem:
        """Replace every writable field of one item.

        Args:
            item_id: Item identifier.
            draft: Candidate item fields.

        Returns:
            LedgerItem: Updated item.

        Raises:
            ItemValidationError: Raised when draft violates item invariants.
            ItemNotFoundError: Raised when no item has this id.
        """

        normalized_draft = domain_validate_item_draft(draft)
        updated_item = self._repository.db_ledger_item_update(
            item_id=item_id,
            draft=normalized_draft,
            updated_at_utc=self._clock(),
        )
        if updated_item is None:
            raise ItemNotFoundError(item_id)
        logger.info("ledger.item.update id=%s", item_id)
        return updated_item

    def ledger_item_delete(self, item_id: int) -> None:
        """Delete one item.

        Args:
            item_id: Item identifier.

        Raises:
            ItemNotFoundError: Raised when no item has this id.
        """

        if not self._repository.db_ledger_item_delete(item_id):
            raise ItemNotFoundError(item_id)
        logger.info("ledger.item.delete id=%s", item_id)

    def ledger_analytics_compute(self, date_from: datetime, date_to: datetime) -> AnalyticsResult:
        """Compute amount statistics for one inclusive date range.

        Args:
            date_from: Inclusive lower bound.
            date_to: Inclusive upper bound.

        Returns:
            AnalyticsResult: Aggregated statistics, all zero for an empty range.

        Raises:
            InvalidRangeError: Raised when `date_from > date_to`.
            ValueError: Raised when a bound is offset-naive.
        """

        normalized_from = domain_normalize_timestamp_utc(date_from)
        normalized_to = domain_normalize_timestamp_utc(date_to)
        domain_validate_range(normalized_from, normalized_to)

        items = self._repository.db_ledger_item_list_in_range(date_from=normalized_from, date_to=normalized_to)
        result = self._analytics.analytics_compute(items=items, date_from=normalized_from, date_to=normalized_to)
        logger.info(
            "ledger.analytics.compute from=%s to=%s count=%s method=%s",
            normalized_from.isoformat(),
            normalized_to.isoformat(),
            result.count,
            self._analytics.analytics_method_name(),
        )
        return result


__all__ = ["LedgerItemService"]
