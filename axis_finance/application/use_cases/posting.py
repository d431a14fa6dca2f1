"""Balance posting shared by the transaction use cases.

An account balance is a stored running value. Posting a paid transaction
reads the balance from the snapshot, writes the new value to the store and
only then returns a snapshot carrying it. Postings are applied one at a
time, so chaining the returned snapshots never loses an update.
"""

from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal

from axis_finance.application.ports.records_store import (
    EntityKind,
    PersistenceError,
    RecordsStorePort,
)
from axis_finance.domain.models import FinanceSnapshot, Transaction
from axis_finance.infrastructure.logging.logger import get_app_logger


class BalancePoster:
    """Apply the balance effect of paid transactions to accounts."""

    def __init__(self, store: RecordsStorePort, logger=None) -> None:
        """Initialize the poster.

        Args:
            store: Port used to persist the new balances.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def post(
        self,
        snapshot: FinanceSnapshot,
        transaction: Transaction,
    ) -> FinanceSnapshot:
        """Apply a paid transaction to its accounts.

        Args:
            snapshot: Snapshot holding the current balances.
            transaction: Transaction to post. Pending ones are ignored.

        Returns:
            FinanceSnapshot: Snapshot with the updated balances.
        """
        if not transaction.is_paid:
            return snapshot
        for account_id, delta in self.balance_deltas(snapshot, transaction):
            snapshot = self._adjust(snapshot, account_id, delta)
        return snapshot

    def balance_deltas(
        self,
        snapshot: FinanceSnapshot,
        transaction: Transaction,
    ) -> list[tuple[str, Decimal]]:
        """Return the (account id, signed change) pairs of a transaction."""
        amount = transaction.amount
        if transaction.is_transfer:
            source = snapshot.find_account(transaction.account_id)
            target = snapshot.find_account(transaction.transfer_to_account_id)
            if source is None or target is None:
                self._logger.warning(
                    f"Transfer {transaction.id} references an unknown "
                    f"account; balances left unchanged"
                )
                return []
            return [(source.id, -amount), (target.id, amount)]

        if not transaction.account_id:
            return []
        account = snapshot.find_account(transaction.account_id)
        if account is None:
            self._logger.warning(
                f"Transaction {transaction.id} references unknown account "
                f"{transaction.account_id}; balance left unchanged"
            )
            return []
        category = snapshot.find_category(transaction.category_id)
        if category is None:
            self._logger.warning(
                f"Transaction {transaction.id} has no resolvable category; "
                f"posting it as an expense"
            )
        if category is not None and category.is_income:
            return [(account.id, amount)]
        return [(account.id, -amount)]

    def _adjust(
        self,
        snapshot: FinanceSnapshot,
        account_id: str,
        delta: Decimal,
    ) -> FinanceSnapshot:
        account = snapshot.get_account(account_id)
        new_balance = account.current_balance + delta
        updated_at = datetime.now(timezone.utc)
        try:
            self._store.update(
                EntityKind.ACCOUNT,
                account_id,
                {"current_balance": new_balance, "updated_at": updated_at},
            )
        except PersistenceError:
            self._logger.error(
                f"Failed to update balance of account {account_id}"
            )
            raise
        self._logger.info(
            f"Account {account_id} balance: "
            f"{account.current_balance} -> {new_balance}"
        )
        return snapshot.with_account(
            replace(
                account,
                current_balance=new_balance,
                updated_at=updated_at,
            )
        )


__all__ = ["BalancePoster"]
