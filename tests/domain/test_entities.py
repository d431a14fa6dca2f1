"""Tests for the domain entities."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from axis_finance.domain.constants import (
    AccountType,
    CategoryType,
    LogicTag,
    TransactionStatus,
)
from axis_finance.domain.errors import DomainValidationError
from axis_finance.domain.models import Account, Category, CreditCard, Transaction


def test_account_coerces_type_and_balance() -> None:
    """Enum values and numeric balances should be normalized."""
    account = Account(name="Wallet", account_type="CASH", current_balance="12.50")

    assert account.account_type is AccountType.CASH
    assert account.current_balance == Decimal("12.50")
    assert account.include_in_total is True


def test_account_rejects_blank_name() -> None:
    with pytest.raises(DomainValidationError):
        Account(name="  ", account_type=AccountType.CHECKING)


def test_category_rejects_logic_tag_on_income() -> None:
    """Logic tags are only meaningful for expense categories."""
    with pytest.raises(DomainValidationError):
        Category(
            name="Salary",
            category_type=CategoryType.INCOME,
            logic_tag=LogicTag.ESSENTIAL,
        )


def test_category_validates_color_and_budget() -> None:
    with pytest.raises(DomainValidationError):
        Category(name="Food", category_type="EXPENSE", color="red")
    with pytest.raises(DomainValidationError):
        Category(name="Food", category_type="EXPENSE", monthly_budget="-1")

    category = Category(
        name="Food",
        category_type="EXPENSE",
        color="#abc",
        monthly_budget="300",
    )
    assert category.is_expense
    assert not category.is_income
    assert category.monthly_budget == Decimal("300")


@pytest.mark.parametrize("day", [0, 32, "10", True])
def test_credit_card_rejects_invalid_days(day) -> None:
    with pytest.raises(DomainValidationError):
        CreditCard(name="Visa", closing_day=day, due_day=5)


def test_transaction_requires_exactly_one_target() -> None:
    """A non-transfer transaction posts to an account or a card, not both."""
    with pytest.raises(DomainValidationError):
        Transaction(amount=10, description="x", date=date(2024, 1, 1))
    with pytest.raises(DomainValidationError):
        Transaction(
            amount=10,
            description="x",
            date=date(2024, 1, 1),
            account_id="a1",
            card_id="c1",
        )


def test_transaction_rejects_negative_amount_and_datetime() -> None:
    with pytest.raises(DomainValidationError):
        Transaction(
            amount=-1,
            description="x",
            date=date(2024, 1, 1),
            account_id="a1",
        )
    with pytest.raises(DomainValidationError):
        Transaction(
            amount=1,
            description="x",
            date=datetime(2024, 1, 1, 10, 0),
            account_id="a1",
        )


def test_transfer_rules() -> None:
    """Transfers need two distinct accounts, no card and no category."""
    transfer = Transaction(
        amount=100,
        description="Move",
        date=date(2024, 1, 1),
        account_id="a1",
        transfer_to_account_id="a2",
        is_transfer=True,
    )
    assert transfer.is_paid

    with pytest.raises(DomainValidationError):
        Transaction(
            amount=100,
            description="Move",
            date=date(2024, 1, 1),
            account_id="a1",
            transfer_to_account_id="a1",
            is_transfer=True,
        )
    with pytest.raises(DomainValidationError):
        Transaction(
            amount=100,
            description="Move",
            date=date(2024, 1, 1),
            account_id="a1",
            transfer_to_account_id="a2",
        )
    with pytest.raises(DomainValidationError, match="category"):
        Transaction(
            amount=100,
            description="Move",
            date=date(2024, 1, 1),
            account_id="a1",
            transfer_to_account_id="a2",
            category_id="food",
            is_transfer=True,
        )


def test_installment_fields_go_together() -> None:
    with pytest.raises(DomainValidationError):
        Transaction(
            amount=10,
            description="TV",
            date=date(2024, 1, 1),
            card_id="c1",
            installment_number=1,
        )
    with pytest.raises(DomainValidationError):
        Transaction(
            amount=10,
            description="TV",
            date=date(2024, 1, 1),
            card_id="c1",
            installment_number=4,
            total_installments=3,
        )


def test_invoice_link_needs_all_parts() -> None:
    with pytest.raises(DomainValidationError):
        Transaction(
            amount=10,
            description="Pay",
            date=date(2024, 1, 1),
            account_id="a1",
            invoice_card_id="c1",
        )
    with pytest.raises(DomainValidationError):
        Transaction(
            amount=10,
            description="Pay",
            date=date(2024, 1, 1),
            account_id="a1",
            invoice_card_id="c1",
            invoice_month=13,
            invoice_year=2024,
        )


def test_transaction_status_and_month_key() -> None:
    txn = Transaction(
        amount="9.90",
        description="Coffee",
        date=date(2024, 3, 5),
        account_id="a1",
        status="PENDING",
    )

    assert txn.status is TransactionStatus.PENDING
    assert not txn.is_paid
    assert txn.month_key == "2024-03"
