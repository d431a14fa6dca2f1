"""Use case to split a purchase into monthly installments."""

from dataclasses import dataclass, replace

from axis_finance.application.ports.records_store import RecordsStorePort
from axis_finance.application.use_cases.add_transaction import (
    AddTransactionUseCase,
)
from axis_finance.domain.models import FinanceSnapshot, Transaction
from axis_finance.domain.services.installments import build_installment_chain
from axis_finance.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class InstallmentChainResult:
    """Persisted installments and the resulting snapshot."""

    transactions: list[Transaction]
    snapshot: FinanceSnapshot

    @property
    def parent(self) -> Transaction:
        return self.transactions[0]


class CreateInstallmentChainUseCase:
    """Record an installment purchase as one transaction per month."""

    def __init__(self, store: RecordsStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Port used to persist the installments.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()
        self._add_transaction = AddTransactionUseCase(
            store,
            logger=self._logger,
        )

    def execute(
        self,
        snapshot: FinanceSnapshot,
        transaction: Transaction,
        installments: int,
    ) -> InstallmentChainResult:
        """Persist ``installments`` records derived from ``transaction``.

        The first installment is stored first so its id can be set as the
        parent of the following ones. A single installment is recorded as
        a plain transaction.
        The whole chain is written as one unit, so a failure part way
        through leaves no installment stored.

        Args:
            snapshot: Current snapshot.
            transaction: Transaction describing one installment.
            installments: Number of monthly installments.

        Returns:
            InstallmentChainResult: Stored installments, first one first.
        """
        if installments == 1:
            result = self._add_transaction.execute(snapshot, transaction)
            return InstallmentChainResult(
                transactions=[result.record],
                snapshot=result.snapshot,
            )

        first, *rest = build_installment_chain(transaction, installments)
        with self._store.atomic():
            result = self._add_transaction.execute(snapshot, first)
            parent = result.record
            snapshot = result.snapshot
            stored = [parent]
            for draft in rest:
                result = self._add_transaction.execute(
                    snapshot,
                    replace(draft, parent_transaction_id=parent.id),
                )
                stored.append(result.record)
                snapshot = result.snapshot

        self._logger.info(
            f"Created {len(stored)} installments for parent {parent.id}"
        )
        return InstallmentChainResult(transactions=stored, snapshot=snapshot)


__all__ = ["CreateInstallmentChainUseCase", "InstallmentChainResult"]
