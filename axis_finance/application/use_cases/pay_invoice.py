"""Use case to record the payment of a credit-card invoice."""

from datetime import date

from axis_finance.application.ports.records_store import RecordsStorePort
from axis_finance.application.use_cases.add_transaction import (
    AddTransactionUseCase,
)
from axis_finance.application.use_cases.results import MutationResult
from axis_finance.domain.constants import TransactionStatus
from axis_finance.domain.models import FinanceSnapshot, Transaction
from axis_finance.domain.services.invoices import (
    build_invoice,
    invoice_payment_label,
    outstanding_invoice_total,
)
from axis_finance.infrastructure.logging.logger import get_app_logger


class PayInvoiceUseCase:
    """Settle what is still owed on a card invoice from an account."""

    def __init__(self, store: RecordsStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Port used to persist the payment.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()
        self._add_transaction = AddTransactionUseCase(
            store,
            logger=self._logger,
        )

    def execute(
        self,
        snapshot: FinanceSnapshot,
        card_id: str,
        month: int,
        year: int,
        account_id: str | None = None,
        today: date | None = None,
    ) -> MutationResult | None:
        """Record a payment for the outstanding amount of an invoice.

        The payment is a paid expense on the chosen account (the first
        account when none is given), linked to the invoice it settles and
        dated on the invoice due date.

        Args:
            snapshot: Current snapshot.
            card_id: Card whose invoice is paid.
            month: Invoice month (1-12).
            year: Invoice year.
            account_id: Account the payment is drawn from.
            today: Fallback payment date.

        Returns:
            MutationResult | None: The payment, or None when nothing is owed
            or no account is available.

        Raises:
            RecordNotFoundError: If the card is not in the snapshot.
        """
        card = snapshot.get_card(card_id)
        invoice = build_invoice(card, snapshot.transactions, year, month)
        outstanding = outstanding_invoice_total(
            invoice,
            snapshot.transactions,
            card,
        )
        if outstanding <= 0:
            self._logger.info(
                f"Invoice {invoice.key} of card {card.id} has nothing to pay"
            )
            return None

        if account_id is None:
            account = snapshot.accounts[0] if snapshot.accounts else None
        else:
            account = snapshot.find_account(account_id)
        if account is None:
            self._logger.warning(
                f"No account available to pay invoice {invoice.key} "
                f"of card {card.id}"
            )
            return None

        category = next(
            (c for c in snapshot.categories if c.is_expense),
            None,
        )
        payment = Transaction(
            amount=outstanding,
            description=invoice_payment_label(card.name, month, year),
            date=invoice.due_date or today or date.today(),
            status=TransactionStatus.PAID,
            account_id=account.id,
            category_id=category.id if category else None,
            invoice_card_id=card.id,
            invoice_month=month,
            invoice_year=year,
        )
        result = self._add_transaction.execute(snapshot, payment)
        self._logger.info(
            f"Paid {outstanding} of invoice {invoice.key} of card {card.id} "
            f"from account {account.id}"
        )
        return result


__all__ = ["PayInvoiceUseCase"]
