"""Tests for the transaction use cases and balance posting."""

from datetime import date
from decimal import Decimal

import pytest

from axis_finance.application.ports.records_store import (
    EntityKind,
    PersistenceError,
)
from axis_finance.application.use_cases import (
    AddTransactionUseCase,
    CreateInstallmentChainUseCase,
    DeleteTransactionUseCase,
    UpdateTransactionUseCase,
)
from axis_finance.domain.constants import TransactionStatus
from axis_finance.domain.errors import DomainValidationError, RecordNotFoundError
from axis_finance.domain.models import (
    Account,
    Category,
    FinanceSnapshot,
    Transaction,
)


def _snapshot() -> FinanceSnapshot:
    return FinanceSnapshot(
        accounts=[
            Account(
                id="a1",
                name="Bank",
                account_type="CHECKING",
                current_balance=Decimal("1000"),
            ),
            Account(
                id="a2",
                name="Savings",
                account_type="INVESTMENT",
                current_balance=Decimal("0"),
            ),
        ],
        categories=[
            Category(id="food", name="Food", category_type="EXPENSE"),
            Category(id="salary", name="Salary", category_type="INCOME"),
        ],
    )


def _txn(amount, category_id="food", **kwargs) -> Transaction:
    kwargs.setdefault("account_id", "a1")
    return Transaction(
        amount=Decimal(str(amount)),
        description="txn",
        date=date(2024, 3, 10),
        category_id=category_id,
        **kwargs,
    )


@pytest.fixture
def snapshot(store) -> FinanceSnapshot:
    snapshot = _snapshot()
    store.seed_snapshot(snapshot)
    return snapshot


def test_paid_expense_then_income_moves_balance(store, logger, snapshot) -> None:
    """1000 - 150 expense + 200 income ends at 1050."""
    use_case = AddTransactionUseCase(store, logger=logger)

    first = use_case.execute(snapshot, _txn(150))
    second = use_case.execute(first.snapshot, _txn(200, "salary"))

    assert first.snapshot.get_account("a1").current_balance == Decimal("850")
    assert second.snapshot.get_account("a1").current_balance == Decimal("1050")
    assert store.records[EntityKind.ACCOUNT]["a1"]["current_balance"] == Decimal(
        "1050"
    )
    assert second.record.id is not None
    assert len(second.snapshot.transactions) == 2
    assert snapshot.get_account("a1").current_balance == Decimal("1000")


def test_pending_and_card_transactions_do_not_move_balance(
    store, logger, snapshot
) -> None:
    use_case = AddTransactionUseCase(store, logger=logger)

    pending = use_case.execute(
        snapshot,
        _txn(150, status=TransactionStatus.PENDING),
    )
    card = use_case.execute(
        pending.snapshot,
        _txn(80, account_id=None, card_id="c1"),
    )

    assert card.snapshot.get_account("a1").current_balance == Decimal("1000")
    assert not [call for call in store.calls if call[0] == "update"]


def test_paid_transfer_moves_both_accounts(store, logger, snapshot) -> None:
    transfer = Transaction(
        amount=Decimal("300"),
        description="To savings",
        date=date(2024, 3, 10),
        account_id="a1",
        transfer_to_account_id="a2",
        is_transfer=True,
    )

    result = AddTransactionUseCase(store, logger=logger).execute(snapshot, transfer)

    assert result.snapshot.get_account("a1").current_balance == Decimal("700")
    assert result.snapshot.get_account("a2").current_balance == Decimal("300")


def test_unresolved_category_posts_as_expense(store, logger, snapshot) -> None:
    result = AddTransactionUseCase(store, logger=logger).execute(
        snapshot,
        _txn(100, "ghost"),
    )

    assert result.snapshot.get_account("a1").current_balance == Decimal("900")
    logger.warning.assert_called()


def test_insert_failure_leaves_snapshot_untouched(store, logger, snapshot) -> None:
    store.fail_on.add(("insert", EntityKind.TRANSACTION))

    with pytest.raises(PersistenceError):
        AddTransactionUseCase(store, logger=logger).execute(snapshot, _txn(10))

    logger.error.assert_called_once()
    assert snapshot.transactions == ()


def test_failed_transfer_leg_rolls_back_every_write(
    store, logger, snapshot
) -> None:
    """A transfer whose credit leg fails keeps neither the row nor the debit."""
    store.fail_on_nth[("update", EntityKind.ACCOUNT)] = 2
    transfer = Transaction(
        amount=Decimal("40"),
        description="To savings",
        date=date(2024, 3, 10),
        account_id="a1",
        transfer_to_account_id="a2",
        is_transfer=True,
    )

    with pytest.raises(PersistenceError):
        AddTransactionUseCase(store, logger=logger).execute(snapshot, transfer)

    accounts = store.records[EntityKind.ACCOUNT]
    assert store.records[EntityKind.TRANSACTION] == {}
    assert accounts["a1"]["current_balance"] == Decimal("1000")
    assert accounts["a2"]["current_balance"] == Decimal("0")
    logger.error.assert_called()


def test_mark_paid_keeps_pending_when_posting_fails(
    store, logger, snapshot
) -> None:
    added = AddTransactionUseCase(store, logger=logger).execute(
        snapshot,
        _txn(100, status=TransactionStatus.PENDING),
    )
    store.fail_on.add(("update", EntityKind.ACCOUNT))

    with pytest.raises(PersistenceError):
        UpdateTransactionUseCase(store, logger=logger).mark_paid(
            added.snapshot,
            added.record.id,
        )

    stored = store.records[EntityKind.TRANSACTION][added.record.id]
    assert stored["status"] == "PENDING"
    assert store.records[EntityKind.ACCOUNT]["a1"]["current_balance"] == (
        Decimal("1000")
    )


def test_mark_paid_posts_exactly_once(store, logger, snapshot) -> None:
    added = AddTransactionUseCase(store, logger=logger).execute(
        snapshot,
        _txn(100, status=TransactionStatus.PENDING),
    )
    use_case = UpdateTransactionUseCase(store, logger=logger)

    paid = use_case.mark_paid(added.snapshot, added.record.id)
    again = use_case.mark_paid(paid.snapshot, added.record.id)
    edited = use_case.execute(
        again.snapshot,
        added.record.id,
        {"description": "Groceries", "status": TransactionStatus.PAID},
    )

    assert paid.record.is_paid
    assert paid.snapshot.get_account("a1").current_balance == Decimal("900")
    assert again.snapshot is paid.snapshot
    assert edited.snapshot.get_account("a1").current_balance == Decimal("900")
    assert edited.record.description == "Groceries"


def test_update_rejects_read_only_and_invalid_changes(
    store, logger, snapshot
) -> None:
    added = AddTransactionUseCase(store, logger=logger).execute(snapshot, _txn(10))
    use_case = UpdateTransactionUseCase(store, logger=logger)
    calls_before = len(store.calls)

    with pytest.raises(DomainValidationError):
        use_case.execute(added.snapshot, added.record.id, {"id": "other"})
    with pytest.raises(DomainValidationError):
        use_case.execute(added.snapshot, added.record.id, {"amount": "-5"})
    with pytest.raises(RecordNotFoundError):
        use_case.execute(added.snapshot, "missing", {"description": "x"})
    assert len(store.calls) == calls_before


def test_delete_keeps_posted_balance(store, logger, snapshot) -> None:
    added = AddTransactionUseCase(store, logger=logger).execute(snapshot, _txn(150))

    result = DeleteTransactionUseCase(store, logger=logger).execute(
        added.snapshot,
        added.record.id,
    )

    assert result.transactions == ()
    assert result.get_account("a1").current_balance == Decimal("850")
    assert added.record.id not in store.records[EntityKind.TRANSACTION]


def test_installment_chain_links_children_to_parent(
    store, logger, snapshot
) -> None:
    draft = Transaction(
        amount=Decimal("100"),
        description="Phone",
        date=date(2024, 1, 15),
        card_id="c1",
        category_id="food",
    )

    result = CreateInstallmentChainUseCase(store, logger=logger).execute(
        snapshot,
        draft,
        3,
    )

    parent, *children = result.transactions
    assert parent is result.parent
    assert parent.installment_number == 1
    assert parent.parent_transaction_id is None
    assert [child.parent_transaction_id for child in children] == [
        parent.id,
        parent.id,
    ]
    assert [child.date for child in children] == [
        date(2024, 2, 15),
        date(2024, 3, 15),
    ]
    assert all(not child.is_paid for child in children)
    assert len(result.snapshot.transactions) == 3


def test_single_installment_is_a_plain_transaction(
    store, logger, snapshot
) -> None:
    result = CreateInstallmentChainUseCase(store, logger=logger).execute(
        snapshot,
        _txn(50),
        1,
    )

    (only,) = result.transactions
    assert only.installment_number is None
    assert result.snapshot.get_account("a1").current_balance == Decimal("950")


def test_installment_chain_failure_stores_nothing(
    store, logger, snapshot
) -> None:
    store.fail_on_nth[("insert", EntityKind.TRANSACTION)] = 3
    draft = Transaction(
        amount=Decimal("100"),
        description="Phone",
        date=date(2024, 1, 15),
        card_id="c1",
        category_id="food",
    )

    with pytest.raises(PersistenceError):
        CreateInstallmentChainUseCase(store, logger=logger).execute(
            snapshot,
            draft,
            4,
        )

    assert store.records[EntityKind.TRANSACTION] == {}
