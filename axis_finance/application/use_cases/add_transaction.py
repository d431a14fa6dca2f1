"""Use case to record a transaction and post its balance effect."""

from axis_finance.application.mappers import to_record, transaction_from_record
from axis_finance.application.ports.records_store import (
    EntityKind,
    PersistenceError,
    RecordsStorePort,
)
from axis_finance.application.use_cases.posting import BalancePoster
from axis_finance.application.use_cases.results import MutationResult
from axis_finance.domain.models import FinanceSnapshot, Transaction
from axis_finance.infrastructure.logging.logger import get_app_logger


class AddTransactionUseCase:
    """Persist a transaction, then apply it to account balances."""

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
        transaction: Transaction,
    ) -> MutationResult:
        """Record a transaction.

        The insert and the balance updates are written as one unit; if any
        of them fails, none is kept.

        Paid account transactions move the account balance by their signed
        amount; paid transfers debit the source and credit the destination.
        Card purchases leave account balances untouched.

        Args:
            snapshot: Current snapshot.
            transaction: Validated transaction to record.

        Returns:
            MutationResult: Stored transaction and the updated snapshot.

        Raises:
            PersistenceError: If the store rejects a write.
        """
        try:
            with self._store.atomic():
                stored = self._store.insert(
                    EntityKind.TRANSACTION,
                    to_record(transaction),
                )
                created = transaction_from_record(stored)
                snapshot = self._poster.post(
                    snapshot.with_transaction(created),
                    created,
                )
        except PersistenceError:
            self._logger.error(
                f"Failed to add transaction '{transaction.description}'"
            )
            raise
        self._logger.info(
            f"Added transaction {created.id}: {created.amount} "
            f"on {created.date.isoformat()} ({created.status.value})"
        )
        return MutationResult(record=created, snapshot=snapshot)


__all__ = ["AddTransactionUseCase"]
