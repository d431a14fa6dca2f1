"""Use case to load every finance collection from the store."""

from axis_finance.application.mappers import SNAPSHOT_COLLECTIONS, from_record
from axis_finance.application.ports.records_store import (
    EntityKind,
    PersistenceError,
    RecordsStorePort,
)
from axis_finance.domain.errors import DomainValidationError
from axis_finance.domain.models import FinanceSnapshot
from axis_finance.domain.services.aggregation import unresolved_category_ids
from axis_finance.infrastructure.logging.logger import get_app_logger


class LoadSnapshotUseCase:
    """Build a FinanceSnapshot from the records store."""

    def __init__(self, store: RecordsStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Port providing the persisted records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self) -> FinanceSnapshot:
        """Return a snapshot of accounts, categories, cards and transactions.

        Records failing validation are skipped with a warning. Empty
        collections are a valid state.

        Returns:
            FinanceSnapshot: Loaded collections.

        Raises:
            PersistenceError: If the store cannot be read.
        """
        collections = {}
        for kind, collection in SNAPSHOT_COLLECTIONS.items():
            collections[collection] = self._load(kind)

        collections["transactions"] = sorted(
            collections["transactions"],
            key=lambda txn: txn.date,
        )
        snapshot = FinanceSnapshot(**collections)

        missing = unresolved_category_ids(
            snapshot.transactions,
            snapshot.categories,
        )
        if missing:
            self._logger.warning(
                f"{len(missing)} category ids referenced by transactions "
                f"are not loaded; those transactions stay uncategorized"
            )
        self._logger.info(
            f"Loaded snapshot: accounts={len(snapshot.accounts)}, "
            f"categories={len(snapshot.categories)}, "
            f"cards={len(snapshot.cards)}, "
            f"transactions={len(snapshot.transactions)}"
        )
        return snapshot

    def _load(self, kind: EntityKind) -> list:
        try:
            records = self._store.query(kind)
        except PersistenceError:
            self._logger.error(f"Failed to load {kind.value} records")
            raise
        entities = []
        rejected = 0
        for record in records:
            try:
                entities.append(from_record(kind, record))
            except DomainValidationError as exc:
                rejected += 1
                self._logger.warning(
                    f"Skipping invalid {kind.value} {record.get('id')}: {exc}"
                )
        if rejected:
            self._logger.warning(
                f"Filtered out {rejected} invalid {kind.value} records"
            )
        return entities


__all__ = ["LoadSnapshotUseCase"]
