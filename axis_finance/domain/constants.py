"""Domain constants for personal finance tracking."""

from decimal import Decimal
from enum import Enum


class AccountType(str, Enum):
    """Kinds of money containers."""

    CHECKING = "CHECKING"
    INVESTMENT = "INVESTMENT"
    CASH = "CASH"


class CategoryType(str, Enum):
    """Direction of money for a category."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class LogicTag(str, Enum):
    """Spending classification for expense categories."""

    ESSENTIAL = "ESSENTIAL"
    SUPERFLUOUS = "SUPERFLUOUS"
    INVESTMENT = "INVESTMENT"


class TransactionStatus(str, Enum):
    """Settlement state of a transaction."""

    PAID = "PAID"
    PENDING = "PENDING"


# Labels written by earlier versions of the application.
ACCOUNT_TYPE_ALIASES = {
    "CORRENTE": AccountType.CHECKING,
    "INVESTIMENTO": AccountType.INVESTMENT,
    "DINHEIRO": AccountType.CASH,
}
CATEGORY_TYPE_ALIASES = {
    "RECEITA": CategoryType.INCOME,
    "DESPESA": CategoryType.EXPENSE,
}
LOGIC_TAG_ALIASES = {
    "ESSENCIAL": LogicTag.ESSENTIAL,
    "SUPÉRFLUO": LogicTag.SUPERFLUOUS,
    "SUPERFLUO": LogicTag.SUPERFLUOUS,
    "INVESTIMENTO": LogicTag.INVESTMENT,
}
TRANSACTION_STATUS_ALIASES = {
    "PAGO": TransactionStatus.PAID,
    "PENDENTE": TransactionStatus.PENDING,
}

DEFAULT_INVESTMENT_GOAL_PERCENT = Decimal("0.20")
SUPERFLUOUS_WARNING_PERCENT = Decimal("30")

# Invoice slots relative to the current month.
INVOICE_WINDOW_OFFSETS = tuple(range(-2, 4))

INVOICE_PAYMENT_LABEL = "Payment for invoice"

DEFAULT_CATEGORIES = (
    {
        "name": "Food",
        "icon": "utensils",
        "color": "#ef4444",
        "category_type": CategoryType.EXPENSE,
        "logic_tag": LogicTag.ESSENTIAL,
    },
    {
        "name": "Transport",
        "icon": "car",
        "color": "#f97316",
        "category_type": CategoryType.EXPENSE,
        "logic_tag": LogicTag.ESSENTIAL,
    },
    {
        "name": "Housing",
        "icon": "home",
        "color": "#8b5cf6",
        "category_type": CategoryType.EXPENSE,
        "logic_tag": LogicTag.ESSENTIAL,
    },
    {
        "name": "Leisure",
        "icon": "smile",
        "color": "#ec4899",
        "category_type": CategoryType.EXPENSE,
        "logic_tag": LogicTag.SUPERFLUOUS,
    },
    {
        "name": "Shopping",
        "icon": "shopping-bag",
        "color": "#a855f7",
        "category_type": CategoryType.EXPENSE,
        "logic_tag": LogicTag.SUPERFLUOUS,
    },
    {
        "name": "Investments",
        "icon": "trending-up",
        "color": "#10b981",
        "category_type": CategoryType.EXPENSE,
        "logic_tag": LogicTag.INVESTMENT,
    },
    {
        "name": "Salary",
        "icon": "dollar-sign",
        "color": "#22c55e",
        "category_type": CategoryType.INCOME,
        "logic_tag": None,
    },
    {
        "name": "Freelance",
        "icon": "briefcase",
        "color": "#14b8a6",
        "category_type": CategoryType.INCOME,
        "logic_tag": None,
    },
)


__all__ = [
    "AccountType",
    "CategoryType",
    "LogicTag",
    "TransactionStatus",
    "ACCOUNT_TYPE_ALIASES",
    "CATEGORY_TYPE_ALIASES",
    "LOGIC_TAG_ALIASES",
    "TRANSACTION_STATUS_ALIASES",
    "DEFAULT_INVESTMENT_GOAL_PERCENT",
    "SUPERFLUOUS_WARNING_PERCENT",
    "INVOICE_WINDOW_OFFSETS",
    "INVOICE_PAYMENT_LABEL",
    "DEFAULT_CATEGORIES",
]
