"""Shared ledger item normalization and validation helpers.

This module centralizes the item invariants so the service layer and tests
enforce one contract: non-negative amount, known item type, non-blank
category, and offset-aware timestamps normalized to UTC.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation

from .errors import InvalidRangeError, ItemValidationError
from .models import ItemType, LedgerItemDraft

_DOMAIN_AMOUNT_MAX_SCALE = 2
_DOMAIN_AMOUNT_MAX_INTEGER_DIGITS = 16


def domain_normalize_timestamp_utc(value: datetime) -> datetime:
    """Normalize one offset-aware timestamp to UTC.

    Args:
        value: Candidate timestamp.

    Returns:
        datetime: Equivalent timestamp in UTC.

    Raises:
        ValueError: Raised when timestamp is offset-naive.
    """

    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError("timestamp must be offset-aware")
    return value.astimezone(timezone.utc)


def domain_parse_timestamp_utc(value: str) -> datetime:
    """Parse one RFC 3339 / ISO-8601 timestamp string into UTC.

    Args:
        value: Timestamp text such as `2024-01-31T00:00:00Z`.

    Returns:
        datetime: Parsed timestamp in UTC.

    Raises:
        ValueError: Raised when text is blank, malformed, or offset-naive.
    """

    normalized_value = value.strip()
    if not normalized_value:
        raise ValueError("timestamp must not be blank")

    try:
        parsed_timestamp = datetime.fromisoformat(normalized_value)
    except ValueError as error:
        raise ValueError(f"timestamp must be a valid ISO-8601 timestamp: {normalized_value}") from error

    return domain_normalize_timestamp_utc(parsed_timestamp)


def domain_validate_range(date_from: datetime, date_to: datetime) -> None:
    """Reject ranges whose lower bound is after the upper bound.

    Args:
        date_from: Inclusive lower bound.
        date_to: Inclusive upper bound.

    Raises:
        InvalidRangeError: Raised when `date_from > date_to`.
    """

    if date_from > date_to:
        raise InvalidRangeError(
            f"range lower bound must not be after upper bound: from={date_from.isoformat()} to={date_to.isoformat()}"
        )


def domain_validate_item_draft(draft: LedgerItemDraft) -> LedgerItemDraft:
    """Validate one item draft and return its normalized form.

    Args:
        draft: Candidate item draft.

    Returns:
        LedgerItemDraft: Draft with enum type, decimal amount, stripped category and UTC date.

    Raises:
        ItemValidationError: Raised when any item invariant is violated.
    """

    try:
        item_type = ItemType(draft.item_type)
    except ValueError as error:
        raise ItemValidationError("type must be 'income' or 'expense'") from error

    try:
        amount = Decimal(str(draft.amount))
    except InvalidOperation as error:
        raise ItemValidationError("amount must be a number") from error
    if not amount.is_finite():
        raise ItemValidationError("amount must be a finite number")
    if amount < 0:
        raise ItemValidationError("amount cannot be negative")
    # ledger_item.amount is NUMERIC(18,2)
    if amount.normalize().as_tuple().exponent < -_DOMAIN_AMOUNT_MAX_SCALE:
        raise ItemValidationError(f"amount must have at most {_DOMAIN_AMOUNT_MAX_SCALE} decimal places")
    if amount != 0 and amount.adjusted() >= _DOMAIN_AMOUNT_MAX_INTEGER_DIGITS:
        raise ItemValidationError(
            f"amount must have at most {_DOMAIN_AMOUNT_MAX_INTEGER_DIGITS} integer digits"
        )

    category = (draft.category or "").strip()
    if not category:
        raise ItemValidationError("category is required")

    if draft.date is None:
        raise ItemValidationError("date is required")
    try:
        item_date = domain_normalize_timestamp_utc(draft.date)
    except ValueError as error:
        raise ItemValidationError("date must include a timezone offset") from error

    return LedgerItemDraft(item_type=item_type, amount=amount, category=category, date=item_date)


__all__ = [
    "domain_normalize_timestamp_utc",
    "domain_parse_timestamp_utc",
    "domain_validate_item_draft",
    "domain_validate_range",
]
