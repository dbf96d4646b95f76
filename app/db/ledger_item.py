"""Database service for ledger item persistence and date-range reads."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import Engine, text
from sqlalchemy.exc import SQLAlchemyError

from app.domain import ItemType, LedgerItem, LedgerItemDraft

from .interfaces import LedgerItemRepositoryPort

_LEDGER_ITEM_SELECT_COLUMNS = (
    "SELECT "
    "ledger_item_id, item_type, amount, category, item_date_utc, created_at_utc, updated_at_utc "
    "FROM ledger_item "
)


class SQLAlchemyLedgerItemService(LedgerItemRepositoryPort):
    """SQLAlchemy-backed ledger item repository.

    All statements are fixed parameterized templates; optional list filters are
    expressed with `CAST(:param AS timestamptz) IS NULL` guards instead of string
    concatenation.
    """

    def __init__(self, engine: Engine):
        """Initialize ledger item persistence service.

        Args:
            engine: SQLAlchemy engine used for all persistence operations.

        Raises:
            ValueError: Raised when engine is None.
        """

        if engine is None:
            raise ValueError("engine must not be None")
        self._engine = engine

    def db_ledger_item_insert(
        self,
        draft: LedgerItemDraft,
        created_at_utc: datetime,
        updated_at_utc: datetime,
    ) -> LedgerItem:
        """Insert one item and return the stored row.

        Args:
            draft: Validated item fields.
            created_at_utc: Creation timestamp in UTC.
            updated_at_utc: Modification timestamp in UTC.

        Returns:
            LedgerItem: Stored row.

        Raises:
            RuntimeError: Raised when persistence fails.
        """

        try:
            with self._engine.begin() as connection:
                created_row = connection.execute(
                    text(
                        "INSERT INTO ledger_item ("
                        "item_type, amount, category, item_date_utc, created_at_utc, updated_at_utc"
                        ") VALUES ("
                        ":item_type, :amount, :category, :item_date_utc, :created_at_utc, :updated_at_utc"
                        ") "
                        "RETURNING ledger_item_id, item_type, amount, category, item_date_utc, "
                        "created_at_utc, updated_at_utc"
                    ),
                    {
                        **self._build_draft_parameters(draft),
                        "created_at_utc": created_at_utc,
                        "updated_at_utc": updated_at_utc,
                    },
                ).mappings().one()
                return self._map_ledger_item(created_row)
        except SQLAlchemyError as error:
            raise RuntimeError("failed to insert ledger item") from error

    def db_ledger_item_get_by_id(self, item_id: int) -> LedgerItem | None:
        """Fetch one item by id.

        Args:
            item_id: Item identifier.

        Returns:
            LedgerItem | None: Matching row or None.

        Raises:
            RuntimeError: Raised when database read fails.
        """

        try:
            with self._engine.connect() as connection:
                row = connection.execute(
                    text(_LEDGER_ITEM_SELECT_COLUMNS + "WHERE ledger_item_id = :ledger_item_id"),
                    {"ledger_item_id": item_id},
                ).mappings().first()
                if row is None:
                    return None
                return self._map_ledger_item(row)
        except SQLAlchemyError as error:
            raise RuntimeError("failed to fetch ledger item by id") from error

    def db_ledger_item_list(
        self,
        date_from: datetime | None,
        date_to: datetime | None,
        limit: int,
        offset: int,
    ) -> list[LedgerItem]:
        """List items with optional inclusive bounds, newest first.

        Args:
            date_from: Optional inclusive lower bound.
            date_to: Optional inclusive upper bound.
            limit: Maximum number of rows.
            offset: Number of rows to skip.

        Returns:
            list[LedgerItem]: Ordered rows.

        Raises:
            ValueError: Raised when limit or offset are invalid.
            RuntimeError: Raised when database read fails.
        """

        if limit < 1:
            raise ValueError("limit must be >= 1")
        if offset < 0:
            raise ValueError("offset must be >= 0")

        try:
            with self._engine.connect() as connection:
                rows = connection.execute(
                    text(
                        _LEDGER_ITEM_SELECT_COLUMNS
                        + "WHERE (CAST(:date_from AS timestamptz) IS NULL OR item_date_utc >= CAST(:date_from AS timestamptz)) "
                        "AND (CAST(:date_to AS timestamptz) IS NULL OR item_date_utc <= CAST(:date_to AS timestamptz)) "
                        "ORDER BY item_date_utc DESC, ledger_item_id DESC "
                        "LIMIT :limit OFFSET :offset"
                    ),
                    {"date_from": date_from, "date_to": date_to, "limit": limit, "offset": offset},
                ).mappings().all()
                return [self._map_ledger_item(row) for row in rows]
        except SQLAlchemyError as error:
            raise RuntimeError("failed to list ledger items") from error

    def db_ledger_item_list_in_range(self, date_from: datetime, date_to: datetime) -> list[LedgerItem]:
        """List every item inside one inclusive range.

        Args:
            date_from: Inclusive lower bound.
            date_to: Inclusive upper bound.

        Returns:
            list[LedgerItem]: Rows ordered by date and id ascending.

        Raises:
            RuntimeError: Raised when database read fails.
        """

        try:
            with self._engine.connect() as connection:
                rows = connection.execute(
                    text(
                        _LEDGER_ITEM_SELECT_COLUMNS
                        + "WHERE item_date_utc >= :date_from AND item_date_utc <= :date_to "
                        "ORDER BY item_date_utc ASC, ledger_item_id ASC"
                    ),
                    {"date_from": date_from, "date_to": date_to},
                ).mappings().all()
                return [self._map_ledger_item(row) for row in rows]
        except SQLAlchemyError as error:
            raise RuntimeError("failed to list ledger items in range") from error

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
            LedgerItem | None: Updated row or None when absent.

        Raises:
            RuntimeError: Raised when persistence fails.
        """

        try:
            with self._engine.begin() as connection:
                updated_row = connection.execute(
                    text(
                        "UPDATE ledger_item SET "
                        "item_type = :item_type, "
                        "amount = :amount, "
                        "category = :category, "
                        "item_date_utc = :item_date_utc, "
                        "updated_at_utc = :updated_at_utc "
                        "WHERE ledger_item_id = :ledger_item_id "
                        "RETURNING ledger_item_id, item_type, amount, category, item_date_utc, "
                        "created_at_utc, updated_at_utc"
                    ),
                    {
                        **self._build_draft_parameters(draft),
                        "updated_at_utc": updated_at_utc,
                        "ledger_item_id": item_id,
                    },
                ).mappings().first()
                if updated_row is None:
                    return None
                return self._map_ledger_item(updated_row)
        except SQLAlchemyError as error:
            raise RuntimeError("failed to update ledger item") from error

    def db_ledger_item_delete(self, item_id: int) -> bool:
        """Delete one item by id.

        Args:
            item_id: Item identifier.

        Returns:
            bool: True when one row was deleted.

        Raises:
            RuntimeError: Raised when persistence fails.
        """

        try:
            with self._engine.begin() as connection:
                deleted_row = connection.execute(
                    text("DELETE FROM ledger_item WHERE ledger_item_id = :ledger_item_id RETURNING ledger_item_id"),
                    {"ledger_item_id": item_id},
                ).first()
                return deleted_row is not None
        except SQLAlchemyError as error:
            raise RuntimeError("failed to delete ledger item") from error

    def _build_draft_parameters(self, draft: LedgerItemDraft) -> dict[str, Any]:
        """Map validated draft fields to bound SQL parameters.

        Args:
            draft: Validated item fields.

        Returns:
            dict[str, Any]: Bound parameter mapping.
        """

        return {
            "item_type": ItemType(draft.item_type).value,
            "amount": draft.amount,
            "category": draft.category,
            "item_date_utc": draft.date,
        }

    def _map_ledger_item(self, row: Any) -> LedgerItem:
        """Map SQLAlchemy row mapping to typed ledger item.

        Args:
            row: SQLAlchemy mapping row.

        Returns:
            LedgerItem: Typed item record.

        Raises:
            ValueError: Raised when stored item type is unsupported.
        """

        return LedgerItem(
            item_id=int(row["ledger_item_id"]),
            item_type=ItemType(row["item_type"]),
            amount=Decimal(row["amount"]),
            category=row["category"],
            date=row["item_date_utc"],
            created_at_utc=row["created_at_utc"],
            updated_at_utc=row["updated_at_utc"],
        )
