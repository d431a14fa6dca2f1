"""Domain services for credit-card invoice cycles.

A card statement closes on ``closing_day``. Purchases made after that day
belong to the statement closing in the next calendar month. The due date
falls in the same month as the closing date unless the due day is
numerically smaller than the closing day, in which case it moves to the
following month.
"""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from axis_finance.domain.constants import (
    INVOICE_PAYMENT_LABEL,
    INVOICE_WINDOW_OFFSETS,
)
from axis_finance.domain.models import (
    CardSummary,
    CreditCard,
    Invoice,
    Transaction,
)
from axis_finance.utils.dates import clamp_day, month_key, shift_month

ZERO = Decimal("0")


def invoice_month_for(closing_day: int, transaction_date: date) -> tuple[int, int]:
    """Return the (month, year) of the invoice a purchase belongs to.

    Args:
        closing_day: Day of month the card statement closes.
        transaction_date: Date of the purchase.

    Returns:
        tuple[int, int]: Invoice month (1-12) and year.
    """
    year, month = transaction_date.year, transaction_date.month
    if transaction_date.day > closing_day:
        year, month = shift_month(year, month, 1)
    return month, year


def invoice_dates(card: CreditCard, year: int, month: int) -> tuple[date, date]:
    """Return the closing and due dates of a card's invoice.

    Days past the end of a short month are moved to its last day.
    """
    closing_date = clamp_day(year, month, card.closing_day)
    due_date = clamp_day(year, month, card.due_day)
    if due_date < closing_date:
        next_year, next_month = shift_month(year, month, 1)
        due_date = clamp_day(next_year, next_month, card.due_day)
    return closing_date, due_date


def build_invoice_window(
    card: CreditCard,
    transactions: Iterable[Transaction],
    today: date,
) -> list[Invoice]:
    """Build the six invoices around the current month.

    Slots cover two months back to three months ahead of ``today``. Card
    transactions whose invoice falls outside the window are left out.

    Args:
        card: Card to build invoices for.
        transactions: Full transaction set; other cards are ignored.
        today: Reference date for the window.

    Returns:
        list[Invoice]: Invoices sorted by (year, month).
    """
    slots: dict[str, list[Transaction]] = {}
    periods: dict[str, tuple[int, int]] = {}
    for offset in INVOICE_WINDOW_OFFSETS:
        year, month = shift_month(today.year, today.month, offset)
        key = month_key(year, month)
        slots[key] = []
        periods[key] = (year, month)

    for txn in transactions:
        if txn.card_id != card.id:
            continue
        month, year = invoice_month_for(card.closing_day, txn.date)
        members = slots.get(month_key(year, month))
        if members is not None:
            members.append(txn)

    return [
        _assemble_invoice(card, *periods[key], slots[key])
        for key in sorted(slots)
    ]


def build_invoice(
    card: CreditCard,
    transactions: Iterable[Transaction],
    year: int,
    month: int,
) -> Invoice:
    """Build a single invoice of a card for (year, month)."""
    members = [
        txn
        for txn in transactions
        if txn.card_id == card.id
        and invoice_month_for(card.closing_day, txn.date) == (month, year)
    ]
    return _assemble_invoice(card, year, month, members)


def _assemble_invoice(
    card: CreditCard,
    year: int,
    month: int,
    members: list[Transaction],
) -> Invoice:
    closing_date, due_date = invoice_dates(card, year, month)
    members = sorted(members, key=lambda txn: txn.date)
    return Invoice(
        card_id=card.id,
        month=month,
        year=year,
        transactions=tuple(members),
        total=sum((txn.amount for txn in members), ZERO),
        closing_date=closing_date,
        due_date=due_date,
    )


def invoice_payment_label(card_name: str, month: int, year: int) -> str:
    """Return the description used for an invoice payment."""
    return f"{INVOICE_PAYMENT_LABEL} {card_name} {month:02d}/{year:04d}"


def is_invoice_payment(
    transaction: Transaction,
    invoice: Invoice,
    card: CreditCard,
) -> bool:
    """Return True when a transaction settles (part of) an invoice.

    Payments are paid, account-linked, non-transfer transactions. A payment
    carrying an invoice link matches on card, month and year. A payment
    without a link matches on its description label.
    """
    if not transaction.is_paid or transaction.is_transfer:
        return False
    if not transaction.account_id or transaction.card_id:
        return False
    if transaction.invoice_card_id is not None:
        return (
            transaction.invoice_card_id == card.id
            and transaction.invoice_month == invoice.month
            and transaction.invoice_year == invoice.year
        )
    label = invoice_payment_label(card.name, invoice.month, invoice.year)
    return transaction.description.startswith(label)


def invoice_paid_amount(
    invoice: Invoice,
    all_transactions: Iterable[Transaction],
    card: CreditCard,
) -> Decimal:
    """Sum the payments recorded against an invoice."""
    return sum(
        (
            txn.amount
            for txn in all_transactions
            if is_invoice_payment(txn, invoice, card)
        ),
        ZERO,
    )


def outstanding_invoice_total(
    invoice: Invoice,
    all_transactions: Iterable[Transaction],
    card: CreditCard,
) -> Decimal:
    """Return what is still owed on an invoice, never below zero."""
    paid = invoice_paid_amount(invoice, all_transactions, card)
    return max(invoice.total - paid, ZERO)


def available_limit(card: CreditCard, outstanding: Decimal) -> Decimal:
    """Return the unused credit limit, floored at zero.

    ``outstanding`` is what is still owed on the current invoice, so
    payments already made against it free their share of the limit.
    """
    return max(card.total_limit - outstanding, ZERO)


def current_invoice(invoices: Iterable[Invoice], today: date) -> Invoice | None:
    """Return the invoice of today's calendar month, if present."""
    return next(
        (
            invoice
            for invoice in invoices
            if (invoice.year, invoice.month) == (today.year, today.month)
        ),
        None,
    )


def summarize_cards(
    cards: Iterable[CreditCard],
    transactions: Iterable[Transaction],
    today: date,
) -> list[CardSummary]:
    """Summarize the current invoice of every card."""
    transactions = list(transactions)
    summaries = []
    for card in cards:
        invoice = current_invoice(
            build_invoice_window(card, transactions, today),
            today,
        )
        outstanding = outstanding_invoice_total(invoice, transactions, card)
        summaries.append(
            CardSummary(
                card_id=card.id,
                name=card.name,
                current_invoice_total=invoice.total,
                outstanding=outstanding,
                available_limit=available_limit(card, outstanding),
                due_date=invoice.due_date,
            )
        )
    return summaries


__all__ = [
    "invoice_month_for",
    "invoice_dates",
    "build_invoice_window",
    "build_invoice",
    "invoice_payment_label",
    "is_invoice_payment",
    "invoice_paid_amount",
    "outstanding_invoice_total",
    "available_limit",
    "current_invoice",
    "summarize_cards",
]
