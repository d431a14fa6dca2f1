"""Domain models for budget aggregates."""

from dataclasses import dataclass, field
from decimal import Decimal

from .entities import Transaction


@dataclass(frozen=True)
class LogicTagBreakdown:
    """Expense totals split by category logic tag."""

    essential: Decimal
    superfluous: Decimal
    investment: Decimal

    @property
    def total(self) -> Decimal:
        """Return the sum of the three buckets."""
        return self.essential + self.superfluous + self.investment


@dataclass(frozen=True)
class NetWorthPoint:
    """Running totals as of the end of a month.

    Attributes:
        key: ``YYYY-MM`` month key.
        income: Cumulative income up to and including the month.
        expense: Cumulative expense up to and including the month.
        net_worth: Cumulative income minus cumulative expense.
    """

    key: str
    year: int
    month: int
    income: Decimal
    expense: Decimal
    net_worth: Decimal


@dataclass(frozen=True)
class CategoryBudgetUsage:
    """Spending of an expense category against its monthly budget."""

    category_id: str
    name: str
    budget: Decimal
    spent: Decimal

    @property
    def remaining(self) -> Decimal:
        return self.budget - self.spent

    @property
    def percent_used(self) -> Decimal:
        if self.budget == 0:
            return Decimal("0")
        return self.spent / self.budget * 100


@dataclass(frozen=True)
class BudgetOverview:
    """Monthly dashboard figures.

    Attributes:
        month: Month (1-12) the figures refer to.
        year: Year the figures refer to.
        total_balance: Sum of balances of accounts included in the total.
        monthly_income: Paid income of the month.
        monthly_expenses: Paid expenses of the month.
        monthly_fixed: Paid recurring expenses of the month.
        breakdown: Essential/superfluous/investment split.
        goal_percent: Fraction of income reserved for investments.
        investment_goal_value: Income times the goal fraction.
        available_buffer: Income minus fixed costs minus the goal.
        days_in_month: Calendar days of the month.
        available_today: Buffer spread across the month, floored at zero.
        investment_percentage: Investment bucket as a share of income.
        superfluous_percentage: Superfluous bucket as a share of the split.
        is_superfluous_high: Whether superfluous spending crosses the
            warning threshold.
    """

    month: int
    year: int
    total_balance: Decimal
    monthly_income: Decimal
    monthly_expenses: Decimal
    monthly_fixed: Decimal
    breakdown: LogicTagBreakdown
    goal_percent: Decimal
    investment_goal_value: Decimal
    available_buffer: Decimal
    days_in_month: int
    available_today: Decimal
    investment_percentage: Decimal
    superfluous_percentage: Decimal
    is_superfluous_high: bool
    essential_share: Decimal = Decimal("0")
    investment_share: Decimal = Decimal("0")


@dataclass(frozen=True)
class StatementFilters:
    """Filters for the transaction statement."""

    search: str = ""
    kind: str = "all"
    source_id: str | None = None
    category_id: str | None = None


@dataclass(frozen=True)
class StatementGroup:
    """Transactions of one month, newest first."""

    key: str
    transactions: list[Transaction] = field(default_factory=list)


__all__ = [
    "LogicTagBreakdown",
    "NetWorthPoint",
    "CategoryBudgetUsage",
    "BudgetOverview",
    "StatementFilters",
    "StatementGroup",
]
