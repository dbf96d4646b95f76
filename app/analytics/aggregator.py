"""Date-range analytics over ledger item amounts.

Percentiles use linear interpolation between closest ranks: for fraction `p`
over ascending amounts `A[0..n-1]` the rank index is `p * (n - 1)`; an integral
index selects `A[index]`, otherwise the two neighbouring order statistics are
interpolated by the fractional part. The median is computed separately with the
standard odd/even rule. All arithmetic is `Decimal` so results are exact.

Both range bounds are inclusive. An empty range yields an all-zero result.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime
from decimal import Decimal

from app.domain import (
    AnalyticsResult,
    LedgerItem,
    domain_normalize_timestamp_utc,
    domain_validate_range,
)

_ANALYTICS_PERCENTILE_90 = Decimal("0.9")
_ANALYTICS_ZERO = Decimal("0")


def analytics_percentile(sorted_amounts: Sequence[Decimal], fraction: Decimal | str) -> Decimal:
    """Compute one percentile with linear interpolation between closest ranks.

    Args:
        sorted_amounts: Ascending amount values.
        fraction: Percentile rank in `[0, 1]`, for example `Decimal("0.9")`.

    Returns:
        Decimal: Interpolated percentile value.

    Raises:
        ValueError: Raised when amounts are empty or fraction is outside `[0, 1]`.
    """

    if not sorted_amounts:
        raise ValueError("sorted_amounts must not be empty")

    normalized_fraction = Decimal(str(fraction))
    if normalized_fraction < 0 or normalized_fraction > 1:
        raise ValueError("fraction must be within [0, 1]")

    rank_index = normalized_fraction * (len(sorted_amounts) - 1)
    lower_index = int(rank_index)
    weight = rank_index - lower_index
    lower_value = sorted_amounts[lower_index]
    if weight == 0:
        return lower_value

    upper_value = sorted_amounts[lower_index + 1]
    return lower_value + weight * (upper_value - lower_value)


def analytics_median(sorted_amounts: Sequence[Decimal]) -> Decimal:
    """Compute the median of ascending amounts.

    Args:
        sorted_amounts: Ascending amount values.

    Returns:
        Decimal: Middle value, or mean of the two middle values for even length.

    Raises:
        ValueError: Raised when amounts are empty.
    """

    amount_count = len(sorted_amounts)
    if amount_count == 0:
        raise ValueError("sorted_amounts must not be empty")

    middle_index = amount_count // 2
    if amount_count % 2 == 1:
        return sorted_amounts[middle_index]
    return (sorted_amounts[middle_index - 1] + sorted_amounts[middle_index]) / 2


def analytics_compute(
    items: Iterable[LedgerItem],
    date_from: datetime,
    date_to: datetime,
) -> AnalyticsResult:
    """Compute count, sum, mean, median and 90th percentile for one range.

    Args:
        items: Candidate ledger items in any order; not mutated.
        date_from: Inclusive offset-aware lower bound.
        date_to: Inclusive offset-aware upper bound.

    Returns:
        AnalyticsResult: Aggregated statistics, all zero for an empty range.

    Raises:
        InvalidRangeError: Raised when `date_from > date_to`.
        ValueError: Raised when a bound is offset-naive.
    """

    normalized_from = domain_normalize_timestamp_utc(date_from)
    normalized_to = domain_normalize_timestamp_utc(date_to)
    domain_validate_range(normalized_from, normalized_to)

    sorted_amounts = sorted(
        Decimal(item.amount) for item in items if normalized_from <= item.date <= normalized_to
    )
    amount_count = len(sorted_amounts)
    if amount_count == 0:
        return AnalyticsResult(
            count=0,
            sum=_ANALYTICS_ZERO,
            avg=_ANALYTICS_ZERO,
            median=_ANALYTICS_ZERO,
            percentile_90=_ANALYTICS_ZERO,
        )

    amount_sum = sum(sorted_amounts, _ANALYTICS_ZERO)
    return AnalyticsResult(
        count=amount_count,
        sum=amount_sum,
        avg=amount_sum / amount_count,
        median=analytics_median(sorted_amounts),
        percentile_90=analytics_percentile(sorted_amounts, _ANALYTICS_PERCENTILE_90),
    )


class AnalyticsAggregator:
    """Analytics port implementation backed by in-memory interpolation."""

    def analytics_method_name(self) -> str:
        """Return the percentile method label.

        Returns:
            str: Percentile method identifier.
        """

        return "linear_interpolation"

    def analytics_compute(
        self,
        items: Iterable[LedgerItem],
        date_from: datetime,
        date_to: datetime,
    ) -> AnalyticsResult:
        """Delegate to the module-level range aggregation.

        Args:
            items: Candidate ledger items.
            date_from: Inclusive lower bound.
            date_to: Inclusive upper bound.

        Returns:
            AnalyticsResult: Aggregated statistics.

        Raises:
            InvalidRangeError: Raised when `date_from > date_to`.
        """

        return analytics_compute(items=items, date_from=date_from, date_to=date_to)


__all__ = ["AnalyticsAggregator", "analytics_compute", "analytics_median", "analytics_percentile"]
