"""Tests for installment chains."""

from datetime import date
from decimal import Decimal

import pytest

from axis_finance.domain.constants import TransactionStatus
from axis_finance.domain.errors import DomainValidationError
from axis_finance.domain.models import Transaction
from axis_finance.domain.services.installments import build_installment_chain

BASE = Transaction(
    amount=Decimal("100"),
    description="Laptop",
    date=date(2024, 1, 31),
    card_id="c1",
    category_id="shop",
)


def test_chain_has_n_records_one_month_apart() -> None:
    chain = build_installment_chain(BASE, 3, parent_id="t-1")

    assert len(chain) == 3
    assert [txn.installment_number for txn in chain] == [1, 2, 3]
    assert {txn.total_installments for txn in chain} == {3}
    assert [txn.date for txn in chain] == [
        date(2024, 1, 31),
        date(2024, 2, 29),
        date(2024, 3, 31),
    ]


def test_first_keeps_status_rest_are_pending() -> None:
    chain = build_installment_chain(BASE, 3, parent_id="t-1")

    assert chain[0].status is TransactionStatus.PAID
    assert chain[0].parent_transaction_id is None
    assert all(txn.status is TransactionStatus.PENDING for txn in chain[1:])
    assert all(txn.parent_transaction_id == "t-1" for txn in chain[1:])


@pytest.mark.parametrize("count", [1, 0, 2.5, True])
def test_chain_rejects_invalid_counts(count) -> None:
    with pytest.raises(DomainValidationError):
        build_installment_chain(BASE, count)
