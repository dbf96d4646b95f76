"""Typed interfaces for database-layer services.

All SQL and ORM access must remain in the db package and its submodules.
"""

from datetime import datetime
from typing import Protocol

from app.domain import HealthStatus, LedgerItem, LedgerItemDraft


class DatabaseHealthPort(Protocol):
    """Port definition for database connectivity verification."""

    def db_connection_label(self) -> str:
        """Return a stable label for the active database connection target.

        Returns:
            str: Database target label for diagnostics.

        Raises:
            RuntimeError: Raised when connection metadata is unavailable.
        """

    def db_check_health(self) -> HealthStatus:
        """Check database connectivity and return deterministic health payload.

        Returns:
            HealthStatus: Database health status payload.

        Raises:
            ConnectionError: Raised when database cannot be reached.
        """


class LedgerItemRepositoryPort(Protocol):
    """Port definition for ledger item persistence and range reads."""

    def db_ledger_item_insert(
        self,
        draft: LedgerItemDraft,
        created_at_utc: datetime,
        updated_at_utc: datetime,
    ) -> LedgerItem:
        """Insert one validated item and return the stored row.

        Args:
            draft: Validated item fields.
            created_at_utc: Creation timestamp in UTC.
            updated_at_utc: Modification timestamp in UTC.

        Returns:
            LedgerItem: Stored row including storage-assigned id.

        Raises:
            RuntimeError: Raised when persistence fails.
        """

    def db_ledger_item_get_by_id(self, item_id: int) -> LedgerItem | None:
        """Fetch one item by primary key.

        Args:
            item_id: Item identifier.

        Returns:
            LedgerItem | None: Matching row, or None when absent.

        Raises:
            RuntimeError: Raised when database read fails.
        """

    def db_ledger_item_list(
        self,
        date_from: datetime | None,
        date_to: datetime | None,
        limit: int,
        offset: int,
    ) -> list[LedgerItem]:
        """List items with optional inclusive date bounds, newest first.

        Args:
            date_from: Optional inclusive lower bound.
            date_to: Optional inclusive upper bound.
            limit: Max rows to return.
            offset: Rows to skip.

        Returns:
            list[LedgerItem]: Rows ordered by date and id descending.

        Raises:
            ValueError: Raised when pagination arguments are invalid.
            RuntimeError: Raised when database read fails.
        """

    def db_ledger_item_list_in_range(self, date_from: datetime, date_to: datetime) -> list[LedgerItem]:
        """List every item whose date lies inside one inclusive range.

        Args:
            date_from: Inclusive lower bound.
            date_to: Inclusive upper bound.

        Returns:
            list[LedgerItem]: Unpaginated rows in range.

        Raises:
            RuntimeError: Raised when database read fails.
        """

    def db_ledger_item_update(
        self,
        item_id: int,
        draft: LedgerItemDraft,
        updated_at_utc: datetime,
    ) -> LedgerItem | None:
        """Replace writable fields of one item.

        Args:
            item_id: Item identifier.
            draft: Validated item fields.
            updated_at_utc: Modification timestamp in UTC.

        Returns:
            LedgerItem | None: Updated row, or None when absent.

        Raises:
            RuntimeError: Raised when persistence fails.
        """

    def db_ledger_item_delete(self, item_id: int) -> bool:
        """Delete one item by primary key.

        Args:
            item_id: Item identifier.

        Returns:
            bool: True when a row was deleted.

        Raises:
            RuntimeError: Raised when persistence fails.
        """
