"""Tests for statement filtering and grouping."""

from datetime import date
from decimal import Decimal

import pytest

from axis_finance.domain.models import Category, StatementFilters, Transaction
from axis_finance.domain.services.statement import (
    filter_transactions,
    group_by_month,
)

CATEGORIES = [
    Category(id="inc", name="Salary", category_type="INCOME"),
    Category(id="food", name="Food", category_type="EXPENSE"),
]

TRANSACTIONS = [
    Transaction(
        id="t1",
        amount=Decimal("10"),
        description="Grocery store",
        date=date(2024, 1, 5),
        account_id="a1",
        category_id="food",
    ),
    Transaction(
        id="t2",
        amount=Decimal("3000"),
        description="Salary January",
        date=date(2024, 1, 30),
        account_id="a1",
        category_id="inc",
    ),
    Transaction(
        id="t3",
        amount=Decimal("45"),
        description="Restaurant",
        date=date(2024, 2, 2),
        card_id="c1",
        category_id="food",
    ),
    Transaction(
        id="t4",
        amount=Decimal("200"),
        description="To savings",
        date=date(2024, 2, 10),
        account_id="a1",
        transfer_to_account_id="a2",
        is_transfer=True,
    ),
]


def _ids(transactions) -> list[str]:
    return [txn.id for txn in transactions]


def test_default_filters_sort_newest_first() -> None:
    result = filter_transactions(TRANSACTIONS, CATEGORIES, StatementFilters())

    assert _ids(result) == ["t4", "t3", "t2", "t1"]


@pytest.mark.parametrize(
    ("filters", "expected"),
    [
        (StatementFilters(search="GROCERY"), ["t1"]),
        (StatementFilters(kind="income"), ["t2"]),
        (StatementFilters(kind="expense"), ["t3", "t1"]),
        (StatementFilters(kind="transfer"), ["t4"]),
        (StatementFilters(source_id="c1"), ["t3"]),
        (StatementFilters(category_id="food"), ["t3", "t1"]),
    ],
)
def test_filters(filters, expected) -> None:
    assert _ids(filter_transactions(TRANSACTIONS, CATEGORIES, filters)) == expected


def test_unknown_kind_raises() -> None:
    with pytest.raises(ValueError):
        filter_transactions(TRANSACTIONS, CATEGORIES, StatementFilters(kind="x"))


def test_group_by_month_keeps_order() -> None:
    ordered = filter_transactions(TRANSACTIONS, CATEGORIES, StatementFilters())

    groups = group_by_month(ordered)

    assert [group.key for group in groups] == ["2024-02", "2024-01"]
    assert _ids(groups[0].transactions) == ["t4", "t3"]
