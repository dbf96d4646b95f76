"""Database layer package for all SQL and persistence boundaries."""

from .health import SQLAlchemyDatabaseHealthService
from .interfaces import DatabaseHealthPort, LedgerItemRepositoryPort
from .ledger_item import SQLAlchemyLedgerItemService
from .session import db_create_engine

__all__ = [
	"DatabaseHealthPort",
	"LedgerItemRepositoryPort",
	"SQLAlchemyDatabaseHealthService",
	"SQLAlchemyLedgerItemService",
	"db_create_engine",
]
