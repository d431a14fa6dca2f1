"""Domain models package."""

from .entities import Account, Category, CreditCard, Transaction
from .finance import (
    BudgetOverview,
    CategoryBudgetUsage,
    LogicTagBreakdown,
    NetWorthPoint,
    StatementFilters,
    StatementGroup,
)
from .invoices import CardSummary, Invoice, InvoiceView
from .snapshot import FinanceSnapshot

__all__ = [
    "Account",
    "Category",
    "CreditCard",
    "Transaction",
    "BudgetOverview",
    "CategoryBudgetUsage",
    "LogicTagBreakdown",
    "NetWorthPoint",
    "StatementFilters",
    "StatementGroup",
    "CardSummary",
    "Invoice",
    "InvoiceView",
    "FinanceSnapshot",
]
