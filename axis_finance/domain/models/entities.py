"""Domain entities for accounts, categories, cards and transactions.

Entities are immutable. Invariants are checked when an entity is built so a
malformed record coming from user input or storage is rejected at the
boundary instead of leaking into aggregations.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from axis_finance.domain.constants import (
    AccountType,
    CategoryType,
    LogicTag,
    TransactionStatus,
)
from axis_finance.domain.errors import DomainValidationError

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}){1,2}$")


def _coerce_enum(instance, field_name: str, enum_type):
    value = getattr(instance, field_name)
    if isinstance(value, enum_type):
        return
    try:
        object.__setattr__(instance, field_name, enum_type(value))
    except ValueError as exc:
        raise DomainValidationError(
            f"Invalid {field_name}: {value!r}"
        ) from exc


def _coerce_amount(instance, field_name: str, *, allow_negative: bool):
    value = getattr(instance, field_name)
    if not isinstance(value, Decimal):
        try:
            value = Decimal(str(value))
        except ArithmeticError as exc:
            raise DomainValidationError(
                f"Invalid {field_name}: {value!r}"
            ) from exc
        object.__setattr__(instance, field_name, value)
    if not value.is_finite():
        raise DomainValidationError(f"Invalid {field_name}: {value!r}")
    if not allow_negative and value < 0:
        raise DomainValidationError(
            f"{field_name} must not be negative: {value}"
        )


def _require_name(name: str, entity: str) -> None:
    if not isinstance(name, str) or not name.strip():
        raise DomainValidationError(f"{entity} name must not be empty")


def _require_day(value: int, field_name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise DomainValidationError(f"{field_name} must be an integer")
    if not 1 <= value <= 31:
        raise DomainValidationError(
            f"{field_name} must be between 1 and 31: {value}"
        )


@dataclass(frozen=True)
class Account:
    """A named money container with a stored running balance."""

    name: str
    account_type: AccountType
    current_balance: Decimal = Decimal("0")
    include_in_total: bool = True
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        _require_name(self.name, "Account")
        _coerce_enum(self, "account_type", AccountType)
        _coerce_amount(self, "current_balance", allow_negative=True)


@dataclass(frozen=True)
class Category:
    """Classification label for transactions."""

    name: str
    category_type: CategoryType
    icon: str = ""
    color: str = "#64748b"
    logic_tag: LogicTag | None = None
    monthly_budget: Decimal | None = None
    id: str | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        _require_name(self.name, "Category")
        _coerce_enum(self, "category_type", CategoryType)
        if self.logic_tag is not None:
            _coerce_enum(self, "logic_tag", LogicTag)
            if self.category_type is CategoryType.INCOME:
                raise DomainValidationError(
                    "Logic tags only apply to expense categories"
                )
        if not _HEX_COLOR.match(self.color or ""):
            raise DomainValidationError(f"Invalid color: {self.color!r}")
        if self.monthly_budget is not None:
            _coerce_amount(self, "monthly_budget", allow_negative=False)

    @property
    def is_income(self) -> bool:
        return self.category_type is CategoryType.INCOME

    @property
    def is_expense(self) -> bool:
        return self.category_type is CategoryType.EXPENSE


@dataclass(frozen=True)
class CreditCard:
    """Billing instrument with a monthly statement cycle.

    Attributes:
        closing_day: Day of month the statement closes.
        due_day: Day of month the statement is due. A due day numerically
            before the closing day falls in the following calendar month.
        total_limit: Credit limit of the card.
    """

    name: str
    closing_day: int
    due_day: int
    total_limit: Decimal = Decimal("0")
    id: str | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        _require_name(self.name, "Credit card")
        _require_day(self.closing_day, "closing_day")
        _require_day(self.due_day, "due_day")
        _coerce_amount(self, "total_limit", allow_negative=False)


@dataclass(frozen=True)
class Transaction:
    """Atomic financial event.

    The amount is a magnitude. Direction comes from the linked category type
    and is derived at aggregation time.

    Attributes:
        account_id: Account the transaction posts to (source for transfers).
        card_id: Card the transaction is billed to.
        transfer_to_account_id: Destination account of a transfer.
        parent_transaction_id: First installment of an installment chain.
        invoice_card_id: Card whose invoice this payment settles.
        invoice_month: Month (1-12) of the settled invoice.
        invoice_year: Year of the settled invoice.
    """

    amount: Decimal
    description: str
    date: date
    status: TransactionStatus = TransactionStatus.PAID
    account_id: str | None = None
    card_id: str | None = None
    category_id: str | None = None
    is_recurring: bool = False
    is_transfer: bool = False
    transfer_to_account_id: str | None = None
    parent_transaction_id: str | None = None
    installment_number: int | None = None
    total_installments: int | None = None
    invoice_card_id: str | None = None
    invoice_month: int | None = None
    invoice_year: int | None = None
    id: str | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        _coerce_amount(self, "amount", allow_negative=False)
        _coerce_enum(self, "status", TransactionStatus)
        if isinstance(self.date, datetime) or not isinstance(self.date, date):
            raise DomainValidationError(
                f"Transaction date must be a calendar date: {self.date!r}"
            )
        self._validate_target()
        self._validate_installments()
        self._validate_invoice_link()

    def _validate_target(self) -> None:
        if self.is_transfer:
            if self.card_id:
                raise DomainValidationError(
                    "Transfers cannot be posted to a card"
                )
            if self.category_id:
                raise DomainValidationError(
                    "Transfers cannot have a category"
                )
            if not self.account_id or not self.transfer_to_account_id:
                raise DomainValidationError(
                    "Transfers need a source and a destination account"
                )
            if self.account_id == self.transfer_to_account_id:
                raise DomainValidationError(
                    "Transfer source and destination must differ"
                )
            return
        if self.transfer_to_account_id:
            raise DomainValidationError(
                "Only transfers may set a destination account"
            )
        if bool(self.account_id) == bool(self.card_id):
            raise DomainValidationError(
                "A transaction needs exactly one of account_id or card_id"
            )

    def _validate_installments(self) -> None:
        number = self.installment_number
        total = self.total_installments
        if number is None and total is None:
            if self.parent_transaction_id:
                raise DomainValidationError(
                    "Installment children need installment numbers"
                )
            return
        if number is None or total is None:
            raise DomainValidationError(
                "installment_number and total_installments go together"
            )
        if not 1 <= number <= total:
            raise DomainValidationError(
                f"Invalid installment {number}/{total}"
            )

    def _validate_invoice_link(self) -> None:
        link = (self.invoice_card_id, self.invoice_month, self.invoice_year)
        if all(value is None for value in link):
            return
        if any(value is None for value in link):
            raise DomainValidationError(
                "Invoice link needs card, month and year"
            )
        if not 1 <= self.invoice_month <= 12:
            raise DomainValidationError(
                f"Invalid invoice month: {self.invoice_month}"
            )

    @property
    def is_paid(self) -> bool:
        return self.status is TransactionStatus.PAID

    @property
    def month_key(self) -> str:
        return f"{self.date.year:04d}-{self.date.month:02d}"


__all__ = ["Account", "Category", "CreditCard", "Transaction"]
