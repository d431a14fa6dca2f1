"""Tests for the composition root."""

from unittest.mock import MagicMock

from axis_finance.infrastructure import container
from axis_finance.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from axis_finance.infrastructure.sql_records_store import SqlAlchemyRecordsStore


def test_build_database_adapter() -> None:
    assert isinstance(
        container.build_database_adapter(),
        SqlAlchemyDatabaseEngineAdapter,
    )


def test_build_records_store_uses_given_port(monkeypatch) -> None:
    monkeypatch.setattr(container, "get_app_logger", MagicMock)
    db_port = MagicMock()

    store = container.build_records_store(db_port)

    assert isinstance(store, SqlAlchemyRecordsStore)
    assert store._db_port is db_port


def test_build_settings_reads_environment(monkeypatch) -> None:
    sentinel = object()
    monkeypatch.setattr(
        container.FinanceSettings,
        "from_env",
        classmethod(lambda cls: sentinel),
    )

    assert container.build_settings() is sentinel
