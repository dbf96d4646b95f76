"""Project-native typed exceptions for ledger item and analytics failures."""

from __future__ import annotations


class ItemValidationError(ValueError):
    """Raised when a ledger item draft violates domain invariants."""


class ItemNotFoundError(LookupError):
    """Raised when a ledger item id does not resolve to a stored row.

    Attributes:
        item_id: Requested ledger item identifier.
    """

    def __init__(self, item_id: int):
        super().__init__(f"item not found: id={item_id}")
        self.item_id = item_id


class InvalidRangeError(ValueError):
    """Raised when a date range lower bound is later than its upper bound."""
