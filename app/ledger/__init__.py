"""Ledger layer package for item use cases and range analytics."""

from .item_service import LedgerItemService

__all__ = ["LedgerItemService"]
