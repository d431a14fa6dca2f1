"""Use cases to add, edit and remove accounts, categories and cards."""

from dataclasses import replace
from datetime import datetime, timezone

from axis_finance.application.mappers import (
    SNAPSHOT_COLLECTIONS,
    changes_to_record,
    field_names,
    from_record,
    to_record,
)
from axis_finance.application.ports.records_store import (
    EntityKind,
    PersistenceError,
    RecordsStorePort,
)
from axis_finance.application.use_cases.results import MutationResult
from axis_finance.domain.errors import DomainValidationError, RecordNotFoundError
from axis_finance.domain.models import FinanceSnapshot
from axis_finance.infrastructure.logging.logger import get_app_logger

_READ_ONLY_FIELDS = {"id", "created_at", "updated_at"}


class _ManageRecordsUseCase:
    """Shared add/update/delete flow for one kind of record.

    The store is written first; the returned snapshot only reflects writes
    that succeeded.
    """

    kind: EntityKind

    def __init__(self, store: RecordsStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Port used to persist the records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()
        self._collection = SNAPSHOT_COLLECTIONS[self.kind]

    def add(self, snapshot: FinanceSnapshot, entity) -> MutationResult:
        """Persist a new record.

        Args:
            snapshot: Current snapshot.
            entity: Validated entity to store.

        Returns:
            MutationResult: Stored entity and the updated snapshot.
        """
        try:
            stored = self._store.insert(self.kind, to_record(entity))
        except PersistenceError:
            self._logger.error(f"Failed to add {self.kind.value} '{entity.name}'")
            raise
        created = from_record(self.kind, stored)
        self._logger.info(f"Added {self.kind.value} {created.id}: {created.name}")
        return MutationResult(
            record=created,
            snapshot=self._with(snapshot, created),
        )

    def update(
        self,
        snapshot: FinanceSnapshot,
        record_id: str,
        changes: dict,
    ) -> MutationResult:
        """Apply a partial update to a record.

        Raises:
            RecordNotFoundError: If the record is not in the snapshot.
            DomainValidationError: If the changes break an invariant.
        """
        current = self._find(snapshot, record_id)
        unknown = set(changes) - (field_names(self.kind) - _READ_ONLY_FIELDS)
        if unknown:
            raise DomainValidationError(
                f"Cannot update {self.kind.value} fields: {sorted(unknown)}"
            )
        changes = self._stamp(dict(changes))
        updated = replace(current, **changes)
        try:
            self._store.update(self.kind, record_id, changes_to_record(changes))
        except PersistenceError:
            self._logger.error(f"Failed to update {self.kind.value} {record_id}")
            raise
        self._logger.info(
            f"Updated {self.kind.value} {record_id}: {sorted(changes)}"
        )
        return MutationResult(
            record=updated,
            snapshot=self._with(snapshot, updated),
        )

    def delete(self, snapshot: FinanceSnapshot, record_id: str) -> FinanceSnapshot:
        """Remove a record and return the snapshot without it."""
        self._find(snapshot, record_id)
        try:
            self._store.delete(self.kind, record_id)
        except PersistenceError:
            self._logger.error(f"Failed to delete {self.kind.value} {record_id}")
            raise
        self._logger.info(f"Deleted {self.kind.value} {record_id}")
        return snapshot.without(self._collection, record_id)

    def _find(self, snapshot: FinanceSnapshot, record_id: str):
        for item in getattr(snapshot, self._collection):
            if item.id == record_id:
                return item
        raise RecordNotFoundError(f"Unknown {self.kind.value}: {record_id}")

    def _stamp(self, changes: dict) -> dict:
        return changes

    def _with(self, snapshot: FinanceSnapshot, entity) -> FinanceSnapshot:
        raise NotImplementedError


class ManageAccountsUseCase(_ManageRecordsUseCase):
    """Maintain accounts.

    Deleting an account leaves its transactions in place.
    """

    kind = EntityKind.ACCOUNT

    def _stamp(self, changes: dict) -> dict:
        changes["updated_at"] = datetime.now(timezone.utc)
        return changes

    def _with(self, snapshot, entity):
        return snapshot.with_account(entity)


class ManageCategoriesUseCase(_ManageRecordsUseCase):
    """Maintain transaction categories."""

    kind = EntityKind.CATEGORY

    def _with(self, snapshot, entity):
        return snapshot.with_category(entity)


class ManageCardsUseCase(_ManageRecordsUseCase):
    """Maintain credit cards."""

    kind = EntityKind.CARD

    def _with(self, snapshot, entity):
        return snapshot.with_card(entity)


__all__ = [
    "ManageAccountsUseCase",
    "ManageCategoriesUseCase",
    "ManageCardsUseCase",
]
