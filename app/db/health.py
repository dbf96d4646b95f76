"""Database reachability probe used by the `/health` endpoint."""

import time

from sqlalchemy import Engine, text
from sqlalchemy.exc import SQLAlchemyError

from app.domain import HealthStatus

from .interfaces import DatabaseHealthPort


class SQLAlchemyDatabaseHealthService(DatabaseHealthPort):
    """Reports whether the ledger database answers a `SELECT 1` and how fast."""

    def __init__(self, engine: Engine):
        """Bind the probe to the shared ledger engine.

        Args:
            engine: Engine whose pool is probed.

        Raises:
            ValueError: Raised when engine is None.
        """

        if engine is None:
            raise ValueError("engine must not be None")
        self._engine = engine

    def db_connection_label(self) -> str:
        """Describe the probed database without leaking credentials.

        Returns:
            str: Engine URL with the password replaced by `***`.
        """

        return self._engine.url.render_as_string(hide_password=True)

    def db_check_health(self) -> HealthStatus:
        """Run one round trip and report its latency in milliseconds.

        Returns:
            HealthStatus: `ok` status with the measured latency.

        Raises:
            ConnectionError: Raised when the database cannot be reached.
        """

        started_at = time.perf_counter()
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as error:
            raise ConnectionError("database connectivity check failed") from error

        elapsed_ms = int((time.perf_counter() - started_at) * 1000)
        return HealthStatus(status="ok", detail=f"database connectivity verified in {elapsed_ms} ms")
