"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI
from sqlalchemy import Engine

from app.analytics import AnalyticsAggregator
from app.api import create_api_application
from app.config import AppSettings, config_load_settings
from app.db import SQLAlchemyDatabaseHealthService, SQLAlchemyLedgerItemService, db_create_engine
from app.ledger import LedgerItemService


def bootstrap_create_item_service(settings: AppSettings, engine: Engine | None = None) -> LedgerItemService:
    """Build ledger item service backed by the configured database.

    Args:
        settings: Validated runtime settings.
        engine: Optional shared engine; created from settings when omitted.

    Returns:
        LedgerItemService: Fully wired item service instance.
    """

    resolved_engine = engine or db_create_engine(database_url=settings.database_url, echo=settings.database_echo)
    return LedgerItemService(
        repository=SQLAlchemyLedgerItemService(engine=resolved_engine),
        analytics=AnalyticsAggregator(),
    )


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings; loaded from environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    engine = db_create_engine(database_url=resolved_settings.database_url, echo=resolved_settings.database_echo)
    return create_api_application(
        settings=resolved_settings,
        db_health_service=SQLAlchemyDatabaseHealthService(engine=engine),
        item_service=bootstrap_create_item_service(resolved_settings, engine=engine),
    )
