"""Domain services package."""

from .aggregation import (
    category_budget_usage,
    expenses_by_logic_tag,
    is_countable,
    monthly_expenses,
    monthly_fixed_expenses,
    monthly_income,
    signed_amount,
    total_balance,
)
from .budget import (
    available_buffer,
    available_today,
    build_budget_overview,
    clamp_goal_percent,
    investment_goal_value,
    net_worth_series,
)
from .installments import build_installment_chain
from .invoices import (
    build_invoice,
    build_invoice_window,
    invoice_month_for,
    invoice_payment_label,
    outstanding_invoice_total,
    summarize_cards,
)
from .normalization import (
    parse_account_type,
    parse_category_type,
    parse_logic_tag,
    parse_status,
)
from .statement import filter_transactions, group_by_month

__all__ = [
    "category_budget_usage",
    "expenses_by_logic_tag",
    "is_countable",
    "monthly_expenses",
    "monthly_fixed_expenses",
    "monthly_income",
    "signed_amount",
    "total_balance",
    "available_buffer",
    "available_today",
    "build_budget_overview",
    "clamp_goal_percent",
    "investment_goal_value",
    "net_worth_series",
    "build_installment_chain",
    "build_invoice",
    "build_invoice_window",
    "invoice_month_for",
    "invoice_payment_label",
    "outstanding_invoice_total",
    "summarize_cards",
    "parse_account_type",
    "parse_category_type",
    "parse_logic_tag",
    "parse_status",
    "filter_transactions",
    "group_by_month",
]
