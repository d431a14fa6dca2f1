"""Domain services for the budget and cash-flow projection."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from axis_finance.domain.constants import (
    DEFAULT_INVESTMENT_GOAL_PERCENT,
    SUPERFLUOUS_WARNING_PERCENT,
    CategoryType,
)
from axis_finance.domain.models import (
    BudgetOverview,
    Category,
    FinanceSnapshot,
    LogicTagBreakdown,
    NetWorthPoint,
    Transaction,
)
from axis_finance.domain.services.aggregation import (
    expenses_by_logic_tag,
    index_categories,
    monthly_expenses,
    monthly_fixed_expenses,
    monthly_income,
    total_balance,
)
from axis_finance.utils.dates import days_in_month as calendar_days
from axis_finance.utils.dates import month_key

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def clamp_goal_percent(value) -> Decimal:
    """Clamp an investment goal fraction to [0, 1]."""
    percent = Decimal(str(value))
    return min(max(percent, ZERO), Decimal("1"))


def investment_goal_value(
    monthly_income: Decimal,
    goal_percent: Decimal = DEFAULT_INVESTMENT_GOAL_PERCENT,
) -> Decimal:
    """Return the part of income reserved for investments."""
    if monthly_income <= 0:
        return ZERO
    return monthly_income * goal_percent


def available_buffer(
    monthly_income: Decimal,
    monthly_fixed: Decimal,
    goal_value: Decimal,
) -> Decimal:
    """Return income left after fixed costs and the investment goal.

    The result may be negative.
    """
    return monthly_income - monthly_fixed - goal_value


def days_in_month(year: int, month: int) -> int:
    return max(calendar_days(year, month), 1)


def available_today(buffer: Decimal, days: int) -> Decimal:
    """Spread the buffer across the month, never below zero."""
    return max(buffer / max(days, 1), ZERO)


def investment_percentage(investment: Decimal, monthly_income: Decimal) -> Decimal:
    if monthly_income == 0:
        return ZERO
    return investment / monthly_income * HUNDRED


def superfluous_percentage(breakdown: LogicTagBreakdown) -> Decimal:
    total = breakdown.total
    if total == 0:
        return ZERO
    return breakdown.superfluous / total * HUNDRED


def is_superfluous_high(
    percentage: Decimal,
    threshold: Decimal = SUPERFLUOUS_WARNING_PERCENT,
) -> bool:
    """Return True when superfluous spending exceeds the threshold."""
    return percentage > threshold


def _share(part: Decimal, whole: Decimal) -> Decimal:
    if whole == 0:
        return ZERO
    return part / whole * HUNDRED


def net_worth_series(
    transactions: Iterable[Transaction],
    categories: Iterable[Category],
) -> list[NetWorthPoint]:
    """Fold paid, non-transfer transactions into running monthly totals.

    Each point holds the cumulative income and expense up to the end of its
    month, in ascending month order.
    """
    index = index_categories(categories)
    monthly: dict[str, list] = {}
    for txn in transactions:
        if not txn.is_paid or txn.is_transfer:
            continue
        key = month_key(txn.date.year, txn.date.month)
        bucket = monthly.setdefault(
            key,
            [txn.date.year, txn.date.month, ZERO, ZERO],
        )
        category = index.get(txn.category_id)
        if category is None:
            continue
        if category.category_type is CategoryType.INCOME:
            bucket[2] += txn.amount
        else:
            bucket[3] += txn.amount

    series = []
    running_income = ZERO
    running_expense = ZERO
    for key in sorted(monthly):
        year, month, income, expense = monthly[key]
        running_income += income
        running_expense += expense
        series.append(
            NetWorthPoint(
                key=key,
                year=year,
                month=month,
                income=running_income,
                expense=running_expense,
                net_worth=running_income - running_expense,
            )
        )
    return series


def build_budget_overview(
    snapshot: FinanceSnapshot,
    today: date,
    *,
    goal_percent: Decimal = DEFAULT_INVESTMENT_GOAL_PERCENT,
    warning_percent: Decimal = SUPERFLUOUS_WARNING_PERCENT,
    strict_fixed: bool = True,
) -> BudgetOverview:
    """Compute the dashboard figures for the month of ``today``.

    Args:
        snapshot: Accounts, categories and transactions to aggregate.
        today: Reference date; its month and year select the period.
        goal_percent: Fraction of income reserved for investments.
        warning_percent: Superfluous share above which spending is flagged.
        strict_fixed: Only count expense categories as fixed costs.

    Returns:
        BudgetOverview: Aggregated monthly figures.
    """
    month, year = today.month, today.year
    transactions = snapshot.transactions
    categories = snapshot.categories
    goal_percent = clamp_goal_percent(goal_percent)

    income = monthly_income(transactions, categories, month, year)
    expenses = monthly_expenses(transactions, categories, month, year)
    fixed = monthly_fixed_expenses(
        transactions,
        categories,
        month,
        year,
        strict=strict_fixed,
    )
    breakdown = expenses_by_logic_tag(transactions, categories, month, year)
    goal_value = investment_goal_value(income, goal_percent)
    buffer = available_buffer(income, fixed, goal_value)
    days = days_in_month(year, month)
    superfluous = superfluous_percentage(breakdown)

    return BudgetOverview(
        month=month,
        year=year,
        total_balance=total_balance(snapshot.accounts),
        monthly_income=income,
        monthly_expenses=expenses,
        monthly_fixed=fixed,
        breakdown=breakdown,
        goal_percent=goal_percent,
        investment_goal_value=goal_value,
        available_buffer=buffer,
        days_in_month=days,
        available_today=available_today(buffer, days),
        investment_percentage=investment_percentage(
            breakdown.investment,
            income,
        ),
        superfluous_percentage=superfluous,
        is_superfluous_high=is_superfluous_high(superfluous, warning_percent),
        essential_share=_share(breakdown.essential, expenses),
        investment_share=_share(breakdown.investment, expenses),
    )


__all__ = [
    "clamp_goal_percent",
    "investment_goal_value",
    "available_buffer",
    "days_in_month",
    "available_today",
    "investment_percentage",
    "superfluous_percentage",
    "is_superfluous_high",
    "net_worth_series",
    "build_budget_overview",
]
