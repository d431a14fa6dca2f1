"""Conversion between domain entities and store records.

Records are plain dictionaries keyed by entity field names. Enum values are
stored as their string value; amounts stay Decimal and dates stay ``date``.
"""

from dataclasses import fields
from datetime import date, datetime
from enum import Enum
from typing import Any

from axis_finance.application.ports.records_store import EntityKind
from axis_finance.domain.constants import CategoryType
from axis_finance.domain.errors import DomainValidationError
from axis_finance.domain.models import (
    Account,
    Category,
    CreditCard,
    Transaction,
)
from axis_finance.domain.services.normalization import (
    parse_account_type,
    parse_category_type,
    parse_logic_tag,
    parse_status,
)
from axis_finance.utils.decimal_utils import coerce_decimal

ENTITY_TYPES = {
    EntityKind.ACCOUNT: Account,
    EntityKind.CATEGORY: Category,
    EntityKind.CARD: CreditCard,
    EntityKind.TRANSACTION: Transaction,
}

SNAPSHOT_COLLECTIONS = {
    EntityKind.ACCOUNT: "accounts",
    EntityKind.CATEGORY: "categories",
    EntityKind.CARD: "cards",
    EntityKind.TRANSACTION: "transactions",
}


def parse_date(value) -> date:
    """Read a calendar date from a date, datetime or ISO string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError as exc:
            raise DomainValidationError(f"Invalid date: {value!r}") from exc
    raise DomainValidationError(f"Invalid date: {value!r}")


def parse_timestamp(value) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value))
    except ValueError as exc:
        raise DomainValidationError(f"Invalid timestamp: {value!r}") from exc


def _optional_str(value) -> str | None:
    if value is None:
        return None
    cleaned = str(value).strip()
    return cleaned or None


def _optional_int(value) -> int | None:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise DomainValidationError(f"Invalid integer: {value!r}") from exc


def _amount(value):
    try:
        return coerce_decimal(value)
    except ValueError as exc:
        raise DomainValidationError(str(exc)) from exc


def account_from_record(record: dict[str, Any]) -> Account:
    return Account(
        id=_optional_str(record.get("id")),
        name=record.get("name") or "",
        account_type=parse_account_type(record.get("account_type")),
        current_balance=_amount(record.get("current_balance")),
        include_in_total=bool(record.get("include_in_total", True)),
        created_at=parse_timestamp(record.get("created_at")),
        updated_at=parse_timestamp(record.get("updated_at")),
    )


def category_from_record(record: dict[str, Any]) -> Category:
    category_type = parse_category_type(record.get("category_type"))
    budget = record.get("monthly_budget")
    return Category(
        id=_optional_str(record.get("id")),
        name=record.get("name") or "",
        category_type=category_type,
        icon=record.get("icon") or "",
        color=record.get("color") or "#64748b",
        logic_tag=(
            parse_logic_tag(record.get("logic_tag"))
            if category_type is CategoryType.EXPENSE
            else None
        ),
        monthly_budget=None if budget in (None, "") else _amount(budget),
        created_at=parse_timestamp(record.get("created_at")),
    )


def card_from_record(record: dict[str, Any]) -> CreditCard:
    return CreditCard(
        id=_optional_str(record.get("id")),
        name=record.get("name") or "",
        closing_day=_optional_int(record.get("closing_day")),
        due_day=_optional_int(record.get("due_day")),
        total_limit=_amount(record.get("total_limit")),
        created_at=parse_timestamp(record.get("created_at")),
    )


def transaction_from_record(record: dict[str, Any]) -> Transaction:
    return Transaction(
        id=_optional_str(record.get("id")),
        amount=_amount(record.get("amount")),
        description=record.get("description") or "",
        date=parse_date(record.get("date")),
        status=parse_status(record.get("status")),
        account_id=_optional_str(record.get("account_id")),
        card_id=_optional_str(record.get("card_id")),
        category_id=_optional_str(record.get("category_id")),
        is_recurring=bool(record.get("is_recurring", False)),
        is_transfer=bool(record.get("is_transfer", False)),
        transfer_to_account_id=_optional_str(
            record.get("transfer_to_account_id")
        ),
        parent_transaction_id=_optional_str(
            record.get("parent_transaction_id")
        ),
        installment_number=_optional_int(record.get("installment_number")),
        total_installments=_optional_int(record.get("total_installments")),
        invoice_card_id=_optional_str(record.get("invoice_card_id")),
        invoice_month=_optional_int(record.get("invoice_month")),
        invoice_year=_optional_int(record.get("invoice_year")),
        created_at=parse_timestamp(record.get("created_at")),
    )


_FROM_RECORD = {
    EntityKind.ACCOUNT: account_from_record,
    EntityKind.CATEGORY: category_from_record,
    EntityKind.CARD: card_from_record,
    EntityKind.TRANSACTION: transaction_from_record,
}


def from_record(kind: EntityKind, record: dict[str, Any]):
    """Build the domain entity of ``kind`` from a store record."""
    return _FROM_RECORD[EntityKind(kind)](record)


def _plain(value):
    if isinstance(value, Enum):
        return value.value
    return value


def to_record(entity, *, include_id: bool = False) -> dict[str, Any]:
    """Convert an entity to a store record.

    Args:
        entity: Account, Category, CreditCard or Transaction.
        include_id: Keep ``id`` and ``created_at`` in the record.

    Returns:
        dict[str, Any]: Record keyed by field name.
    """
    record = {}
    for field in fields(entity):
        if not include_id and field.name in ("id", "created_at"):
            continue
        record[field.name] = _plain(getattr(entity, field.name))
    return record


def changes_to_record(changes: dict[str, Any]) -> dict[str, Any]:
    """Convert a partial update to store values."""
    return {name: _plain(value) for name, value in changes.items()}


def field_names(kind: EntityKind) -> set[str]:
    return {field.name for field in fields(ENTITY_TYPES[EntityKind(kind)])}


__all__ = [
    "ENTITY_TYPES",
    "SNAPSHOT_COLLECTIONS",
    "parse_date",
    "parse_timestamp",
    "account_from_record",
    "category_from_record",
    "card_from_record",
    "transaction_from_record",
    "from_record",
    "to_record",
    "changes_to_record",
    "field_names",
]
