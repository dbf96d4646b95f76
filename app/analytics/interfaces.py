"""Typed interfaces for analytics-layer aggregations."""

from collections.abc import Iterable
from datetime import datetime
from typing import Protocol

from app.domain import AnalyticsResult, LedgerItem


class AnalyticsPort(Protocol):
    """Port definition for date-range analytics aggregation services."""

    def analytics_method_name(self) -> str:
        """Return the percentile method label used by this service.

        Returns:
            str: Percentile method identifier.

        Raises:
            RuntimeError: Raised when method metadata is unavailable.
        """

    def analytics_compute(
        self,
        items: Iterable[LedgerItem],
        date_from: datetime,
        date_to: datetime,
    ) -> AnalyticsResult:
        """Aggregate amount statistics for items inside one inclusive date range.

        Args:
            items: Candidate ledger items, in any order.
            date_from: Inclusive lower bound.
            date_to: Inclusive upper bound.

        Returns:
            AnalyticsResult: Count, sum, mean, median and 90th percentile.

        Raises:
            InvalidRangeError: Raised when `date_from > date_to`.
        """
