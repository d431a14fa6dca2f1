"""Use case to compute the invoice window of a credit card."""

from datetime import date
from decimal import Decimal

from axis_finance.domain.constants import INVOICE_WINDOW_OFFSETS
from axis_finance.domain.models import CardSummary, FinanceSnapshot, InvoiceView
from axis_finance.domain.services.invoices import (
    build_invoice_window,
    invoice_paid_amount,
    summarize_cards,
)
from axis_finance.infrastructure.logging.logger import get_app_logger


class GetInvoicesUseCase:
    """Compute invoices and outstanding amounts for credit cards."""

    def __init__(self, logger=None) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()

    def execute(
        self,
        snapshot: FinanceSnapshot,
        card_id: str,
        today: date | None = None,
    ) -> list[InvoiceView]:
        """Return the six-month invoice window of a card.

        Args:
            snapshot: Snapshot holding the card and its transactions.
            card_id: Card to compute invoices for.
            today: Reference date, defaults to the current date.

        Returns:
            list[InvoiceView]: Invoices from two months back to three months
            ahead, with what was paid and what is still owed.

        Raises:
            RecordNotFoundError: If the card is not in the snapshot.
        """
        today = today or date.today()
        card = snapshot.get_card(card_id)
        invoices = build_invoice_window(card, snapshot.transactions, today)

        assigned = sum(len(invoice.transactions) for invoice in invoices)
        card_count = sum(
            1 for txn in snapshot.transactions if txn.card_id == card.id
        )
        if card_count > assigned:
            self._logger.info(
                f"{card_count - assigned} transactions of card {card.id} "
                f"fall outside the invoice window"
            )

        views = []
        for offset, invoice in zip(INVOICE_WINDOW_OFFSETS, invoices):
            paid = invoice_paid_amount(invoice, snapshot.transactions, card)
            views.append(
                InvoiceView(
                    invoice=invoice,
                    paid=paid,
                    outstanding=max(invoice.total - paid, Decimal("0")),
                    offset=offset,
                )
            )
        self._logger.info(
            f"Computed {len(views)} invoices for card {card.id} "
            f"around {today.isoformat()}"
        )
        return views

    def summarize(
        self,
        snapshot: FinanceSnapshot,
        today: date | None = None,
    ) -> list[CardSummary]:
        """Return the current-cycle summary of every card."""
        today = today or date.today()
        return summarize_cards(snapshot.cards, snapshot.transactions, today)


__all__ = ["GetInvoicesUseCase"]
