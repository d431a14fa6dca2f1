"""Shared fixtures for the test suite."""

import copy
from contextlib import contextmanager
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from axis_finance.application.mappers import SNAPSHOT_COLLECTIONS, to_record
from axis_finance.application.ports.records_store import (
    EntityKind,
    PersistenceError,
)


class FakeRecordsStore:
    """In-memory RecordsStorePort keeping every call for assertions."""

    def __init__(self) -> None:
        self.records = {kind: {} for kind in EntityKind}
        self.calls = []
        self.fail_on = set()
        self.fail_on_nth = {}
        self._counts = {}
        self._depth = 0
        self._next_id = 0

    def insert(self, kind, record):
        self.calls.append(("insert", kind, dict(record)))
        self._maybe_fail("insert", kind)
        self._next_id += 1
        stored = dict(
            record,
            id=f"{kind.value}-{self._next_id}",
            created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )
        self.records[kind][stored["id"]] = stored
        return dict(stored)

    def update(self, kind, record_id, changes):
        self.calls.append(("update", kind, record_id, dict(changes)))
        self._maybe_fail("update", kind)
        if record_id not in self.records[kind]:
            raise PersistenceError(f"No {kind.value} with id {record_id}")
        self.records[kind][record_id].update(changes)

    def delete(self, kind, record_id):
        self.calls.append(("delete", kind, record_id))
        self._maybe_fail("delete", kind)
        self.records[kind].pop(record_id, None)

    def query(self, kind):
        self.calls.append(("query", kind))
        self._maybe_fail("query", kind)
        return [dict(record) for record in self.records[kind].values()]

    @contextmanager
    def atomic(self):
        """Restore the stored records when the block raises."""
        if self._depth:
            self._depth += 1
            try:
                yield
            finally:
                self._depth -= 1
            return
        saved = copy.deepcopy(self.records)
        self._depth = 1
        try:
            yield
        except Exception:
            self.records = saved
            raise
        finally:
            self._depth = 0

    def seed(self, kind, record):
        self.records[kind][record["id"]] = dict(record)

    def seed_snapshot(self, snapshot):
        """Store every record of a snapshot under its own id."""
        for kind, collection in SNAPSHOT_COLLECTIONS.items():
            for entity in getattr(snapshot, collection):
                self.seed(kind, to_record(entity, include_id=True))

    def _maybe_fail(self, action, kind):
        key = (action, kind)
        self._counts[key] = self._counts.get(key, 0) + 1
        if key in self.fail_on or self.fail_on_nth.get(key) == self._counts[key]:
            raise PersistenceError(f"{action} {kind.value} failed")


@pytest.fixture
def store() -> FakeRecordsStore:
    return FakeRecordsStore()


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()
