"""Analytics layer package for date-range amount aggregation."""

from .aggregator import AnalyticsAggregator, analytics_compute, analytics_median, analytics_percentile
from .interfaces import AnalyticsPort

__all__ = [
    "AnalyticsAggregator",
    "AnalyticsPort",
    "analytics_compute",
    "analytics_median",
    "analytics_percentile",
]
