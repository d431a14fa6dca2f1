"""Use cases for the monthly budget overview and net worth series."""

from datetime import date
from decimal import Decimal

from axis_finance.domain.constants import (
    DEFAULT_INVESTMENT_GOAL_PERCENT,
    SUPERFLUOUS_WARNING_PERCENT,
)
from axis_finance.domain.models import (
    BudgetOverview,
    CategoryBudgetUsage,
    FinanceSnapshot,
    NetWorthPoint,
)
from axis_finance.domain.services.aggregation import category_budget_usage
from axis_finance.domain.services.budget import (
    build_budget_overview,
    clamp_goal_percent,
    net_worth_series,
)
from axis_finance.infrastructure.logging.logger import get_app_logger


class GetBudgetOverviewUseCase:
    """Compute the month's income, spending split and daily allowance."""

    def __init__(
        self,
        logger=None,
        goal_percent: Decimal = DEFAULT_INVESTMENT_GOAL_PERCENT,
        warning_percent: Decimal = SUPERFLUOUS_WARNING_PERCENT,
        strict_fixed: bool = True,
    ) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
            goal_percent: Fraction of income reserved for investments.
            warning_percent: Superfluous share that triggers a warning.
            strict_fixed: Only count expense categories as fixed costs.
        """
        self._logger = logger or get_app_logger()
        self._goal_percent = clamp_goal_percent(goal_percent)
        self._warning_percent = warning_percent
        self._strict_fixed = strict_fixed

    def execute(
        self,
        snapshot: FinanceSnapshot,
        today: date | None = None,
    ) -> BudgetOverview:
        """Return the overview for the month of ``today``.

        Args:
            snapshot: Snapshot to aggregate.
            today: Reference date, defaults to the current date.

        Returns:
            BudgetOverview: Monthly figures.
        """
        today = today or date.today()
        overview = build_budget_overview(
            snapshot,
            today,
            goal_percent=self._goal_percent,
            warning_percent=self._warning_percent,
            strict_fixed=self._strict_fixed,
        )
        self._logger.info(
            f"Budget overview {overview.year}-{overview.month:02d}: "
            f"income={overview.monthly_income}, "
            f"expenses={overview.monthly_expenses}, "
            f"fixed={overview.monthly_fixed}, "
            f"available_today={overview.available_today}"
        )
        if overview.is_superfluous_high:
            self._logger.warning(
                f"Superfluous spending at "
                f"{overview.superfluous_percentage:.1f}% of tracked expenses"
            )
        return overview

    def budgets(
        self,
        snapshot: FinanceSnapshot,
        today: date | None = None,
    ) -> list[CategoryBudgetUsage]:
        """Return spending against each category's monthly budget."""
        today = today or date.today()
        return category_budget_usage(
            snapshot.transactions,
            snapshot.categories,
            today.month,
            today.year,
        )


class GetNetWorthSeriesUseCase:
    """Compute the running net worth from paid transactions."""

    def __init__(self, logger=None) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()

    def execute(self, snapshot: FinanceSnapshot) -> list[NetWorthPoint]:
        """Return one cumulative point per month with paid activity."""
        series = net_worth_series(snapshot.transactions, snapshot.categories)
        self._logger.info(f"Computed net worth series with {len(series)} points")
        return series


__all__ = ["GetBudgetOverviewUseCase", "GetNetWorthSeriesUseCase"]
