"""Tests for record mapping."""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from axis_finance.application.mappers import (
    changes_to_record,
    field_names,
    from_record,
    parse_date,
    parse_timestamp,
    to_record,
)
from axis_finance.application.ports.records_store import EntityKind
from axis_finance.domain.constants import TransactionStatus
from axis_finance.domain.errors import DomainValidationError
from axis_finance.domain.models import Transaction


def test_to_record_uses_enum_values_and_skips_identity() -> None:
    txn = Transaction(
        id="t1",
        amount=Decimal("12.30"),
        description="Taxi",
        date=date(2024, 5, 2),
        account_id="a1",
        status=TransactionStatus.PENDING,
    )

    record = to_record(txn)

    assert "id" not in record
    assert "created_at" not in record
    assert record["status"] == "PENDING"
    assert record["amount"] == Decimal("12.30")
    assert to_record(txn, include_id=True)["id"] == "t1"


def test_transfer_records_with_category_are_rejected() -> None:
    with pytest.raises(DomainValidationError):
        from_record(
            EntityKind.TRANSACTION,
            {
                "id": "t1",
                "amount": "50",
                "description": "Move",
                "date": date(2024, 5, 2),
                "status": "PAID",
                "account_id": "a1",
                "transfer_to_account_id": "a2",
                "is_transfer": 1,
                "category_id": "food",
            },
        )


def test_parse_date_and_timestamp() -> None:
    assert parse_date(datetime(2024, 5, 2, 8, 30)) == date(2024, 5, 2)
    assert parse_date("2024-05-02") == date(2024, 5, 2)
    with pytest.raises(DomainValidationError):
        parse_date("")
    with pytest.raises(DomainValidationError):
        parse_date("02/05/2024")
    assert parse_timestamp(None) is None
    assert parse_timestamp("2024-05-02T10:00:00+00:00") == datetime(
        2024, 5, 2, 10, tzinfo=timezone.utc
    )


def test_changes_and_field_names() -> None:
    assert changes_to_record({"status": TransactionStatus.PAID}) == {
        "status": "PAID"
    }
    assert "closing_day" in field_names(EntityKind.CARD)
