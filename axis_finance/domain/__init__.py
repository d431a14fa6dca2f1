"""Domain package for business rules and core models."""

from .constants import (
    DEFAULT_INVESTMENT_GOAL_PERCENT,
    SUPERFLUOUS_WARNING_PERCENT,
    AccountType,
    CategoryType,
    LogicTag,
    TransactionStatus,
)
from .errors import DomainValidationError, RecordNotFoundError
from .models import (
    Account,
    Category,
    CreditCard,
    FinanceSnapshot,
    Invoice,
    Transaction,
)

__all__ = [
    "DEFAULT_INVESTMENT_GOAL_PERCENT",
    "SUPERFLUOUS_WARNING_PERCENT",
    "AccountType",
    "CategoryType",
    "LogicTag",
    "TransactionStatus",
    "DomainValidationError",
    "RecordNotFoundError",
    "Account",
    "Category",
    "CreditCard",
    "FinanceSnapshot",
    "Invoice",
    "Transaction",
]
