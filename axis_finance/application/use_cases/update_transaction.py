"""Use cases to edit and remove transactions."""

from dataclasses import replace

from axis_finance.application.mappers import changes_to_record, field_names
from axis_finance.application.ports.records_store import (
    EntityKind,
    PersistenceError,
    RecordsStorePort,
)
from axis_finance.application.use_cases.posting import BalancePoster
from axis_finance.application.use_cases.results import MutationResult
from axis_finance.domain.constants import TransactionStatus
from axis_finance.domain.errors import DomainValidationError
from axis_finance.domain.models import FinanceSnapshot
from axis_finance.infrastructure.logging.logger import get_app_logger

_READ_ONLY_FIELDS = {"id", "created_at"}


class UpdateTransactionUseCase:
    """Apply partial updates to a transaction.

    A transaction moving from pending to paid is posted to its accounts.
    Balances are not touched by any other edit, so a transaction is posted
    at most once through this path.
    """

    def __init__(self, store: RecordsStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Port used to persist transactions and balances.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()
        self._poster = BalancePoster(store, logger=self._logger)

    def execute(
        self,
        snapshot: FinanceSnapshot,
        transaction_id: str,
        changes: dict,
    ) -> MutationResult:
        """Update a transaction.

        Args:
            snapshot: Current snapshot.
            transaction_id: Identifier of the transaction to edit.
            changes: Field names and their new values.

        Returns:
            MutationResult: Updated transaction and snapshot.

        Raises:
            RecordNotFoundError: If the transaction is not in the snapshot.
            DomainValidationError: If the changes break an invariant.
            PersistenceError: If the store rejects a write.
        """
        current = snapshot.get_transaction(transaction_id)
        unknown = set(changes) - (
            field_names(EntityKind.TRANSACTION) - _READ_ONLY_FIELDS
        )
        if unknown:
            raise DomainValidationError(
                f"Cannot update transaction fields: {sorted(unknown)}"
            )
        updated = replace(current, **changes)

        try:
            with self._store.atomic():
                self._store.update(
                    EntityKind.TRANSACTION,
                    transaction_id,
                    changes_to_record(changes),
                )
                snapshot = snapshot.with_transaction(updated)
                if not current.is_paid and updated.is_paid:
                    snapshot = self._poster.post(snapshot, updated)
        except PersistenceError:
            self._logger.error(f"Failed to update transaction {transaction_id}")
            raise
        self._logger.info(
            f"Updated transaction {transaction_id}: {sorted(changes)}"
        )
        return MutationResult(record=updated, snapshot=snapshot)

    def mark_paid(
        self,
        snapshot: FinanceSnapshot,
        transaction_id: str,
    ) -> MutationResult:
        """Mark a transaction as paid, posting it if it was pending."""
        current = snapshot.get_transaction(transaction_id)
        if current.is_paid:
            self._logger.info(
                f"Transaction {transaction_id} is already paid"
            )
            return MutationResult(record=current, snapshot=snapshot)
        return self.execute(
            snapshot,
            transaction_id,
            {"status": TransactionStatus.PAID},
        )


class DeleteTransactionUseCase:
    """Remove a transaction.

    Balances already posted by the transaction are left as they are.
    """

    def __init__(self, store: RecordsStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Port used to delete transactions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        snapshot: FinanceSnapshot,
        transaction_id: str,
    ) -> FinanceSnapshot:
        """Delete a transaction and return the snapshot without it."""
        snapshot.get_transaction(transaction_id)
        try:
            self._store.delete(EntityKind.TRANSACTION, transaction_id)
        except PersistenceError:
            self._logger.error(f"Failed to delete transaction {transaction_id}")
            raise
        self._logger.info(f"Deleted transaction {transaction_id}")
        return snapshot.without("transactions", transaction_id)


__all__ = ["UpdateTransactionUseCase", "DeleteTransactionUseCase"]
