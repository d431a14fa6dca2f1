"""Tests for the init_db_cli adapter."""

from unittest.mock import MagicMock

from axis_finance.adapters import init_db_cli
from axis_finance.application.ports.records_store import EntityKind
from axis_finance.domain.constants import DEFAULT_CATEGORIES
from axis_finance.domain.models import Category, FinanceSnapshot


def _patch_loggers(monkeypatch) -> MagicMock:
    fake_logger = MagicMock()
    monkeypatch.setattr(init_db_cli, "get_app_logger", lambda: fake_logger)
    monkeypatch.setattr(init_db_cli, "get_usage_logger", MagicMock)
    return fake_logger


def test_main_seeds_default_categories(monkeypatch, capsys, store):
    """An empty store gets the schema and the default categories."""
    _patch_loggers(monkeypatch)
    store.prepare_schema = MagicMock()
    monkeypatch.setattr(init_db_cli, "build_records_store", lambda: store)

    init_db_cli.main()

    store.prepare_schema.assert_called_once()
    names = {r["name"] for r in store.records[EntityKind.CATEGORY].values()}
    assert names == {defaults["name"] for defaults in DEFAULT_CATEGORIES}
    captured = capsys.readouterr()
    assert str(len(DEFAULT_CATEGORIES)) in captured.out


def test_main_skips_seeding_when_categories_exist(monkeypatch, capsys):
    _patch_loggers(monkeypatch)
    fake_store = MagicMock()
    monkeypatch.setattr(init_db_cli, "build_records_store", lambda: fake_store)
    existing = FinanceSnapshot(
        categories=[Category(id="x", name="Food", category_type="EXPENSE")]
    )
    fake_load = MagicMock()
    fake_load.execute.return_value = existing
    monkeypatch.setattr(
        init_db_cli,
        "LoadSnapshotUseCase",
        lambda store, logger: fake_load,
    )

    init_db_cli.main()

    fake_store.insert.assert_not_called()
    assert "nothing seeded" in capsys.readouterr().out
