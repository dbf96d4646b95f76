"""Domain models used across application layer boundaries."""

from .errors import InvalidRangeError, ItemNotFoundError, ItemValidationError
from .models import AnalyticsResult, HealthStatus, ItemType, LedgerItem, LedgerItemDraft
from .validation import (
    domain_normalize_timestamp_utc,
    domain_parse_timestamp_utc,
    domain_validate_item_draft,
    domain_validate_range,
)

__all__ = [
    "AnalyticsResult",
    "HealthStatus",
    "InvalidRangeError",
    "ItemNotFoundError",
    "ItemType",
    "ItemValidationError",
    "LedgerItem",
    "LedgerItemDraft",
    "domain_normalize_timestamp_utc",
    "domain_parse_timestamp_utc",
    "domain_validate_item_draft",
    "domain_validate_range",
]
