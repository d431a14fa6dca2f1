"""Derived credit-card invoice records."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from .entities import Transaction


@dataclass(frozen=True)
class Invoice:
    """One billing cycle of one card, recomputed on every read.

    Attributes:
        card_id: Owning card.
        month: Invoice month (1-12).
        year: Invoice year.
        transactions: Card transactions assigned to the cycle.
        total: Sum of the member transaction amounts.
        closing_date: Statement closing date.
        due_date: Statement due date.
    """

    card_id: str
    month: int
    year: int
    transactions: tuple[Transaction, ...]
    total: Decimal
    closing_date: date
    due_date: date

    @property
    def key(self) -> str:
        """Return the ``YYYY-MM`` key of the cycle."""
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class InvoiceView:
    """Invoice paired with what is still owed on it."""

    invoice: Invoice
    paid: Decimal
    outstanding: Decimal
    offset: int

    @property
    def is_settled(self) -> bool:
        return self.outstanding <= 0


@dataclass(frozen=True)
class CardSummary:
    """Current-cycle figures for a card."""

    card_id: str
    name: str
    current_invoice_total: Decimal
    outstanding: Decimal
    available_limit: Decimal
    due_date: date


__all__ = ["Invoice", "InvoiceView", "CardSummary"]
