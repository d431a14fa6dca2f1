"""Composition root for wiring infrastructure adapters."""

from axis_finance.application.ports.database import DatabaseEnginePort
from axis_finance.application.ports.records_store import RecordsStorePort
from axis_finance.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from axis_finance.infrastructure.logging.logger import get_app_logger
from axis_finance.infrastructure.settings import FinanceSettings
from axis_finance.infrastructure.sql_records_store import (
    SqlAlchemyRecordsStore,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_records_store(
    db_port: DatabaseEnginePort | None = None,
) -> RecordsStorePort:
    """Return the SQL records store."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyRecordsStore(resolved_db, logger=get_app_logger())


def build_settings() -> FinanceSettings:
    """Return settings read from the environment."""
    return FinanceSettings.from_env()


__all__ = [
    "build_database_adapter",
    "build_records_store",
    "build_settings",
]
