"""CLI adapter printing the current month's budget, invoices and net worth."""

from datetime import date

from axis_finance.application.use_cases.get_budget_overview import (
    GetBudgetOverviewUseCase,
    GetNetWorthSeriesUseCase,
)
from axis_finance.application.use_cases.get_invoices import GetInvoicesUseCase
from axis_finance.application.use_cases.load_snapshot import LoadSnapshotUseCase
from axis_finance.infrastructure.container import (
    build_records_store,
    build_settings,
)
from axis_finance.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from axis_finance.utils.decimal_utils import round_cents


def _money(value, currency: str) -> str:
    return f"{currency} {round_cents(value):,.2f}"


def main(today: date | None = None) -> None:
    """Load the records and print the monthly dashboard figures."""
    today = today or date.today()
    logger = get_app_logger()
    get_usage_logger().info("budget_overview_cli started")
    settings = build_settings()
    currency = settings.currency_code

    snapshot = LoadSnapshotUseCase(build_records_store(), logger=logger).execute()
    overview = GetBudgetOverviewUseCase(
        logger=logger,
        goal_percent=settings.goal_percent,
        warning_percent=settings.warning_percent,
    ).execute(snapshot, today)

    print(f"Budget {overview.year}-{overview.month:02d}")
    print(f"  Total balance:   {_money(overview.total_balance, currency)}")
    print(f"  Income:          {_money(overview.monthly_income, currency)}")
    print(f"  Expenses:        {_money(overview.monthly_expenses, currency)}")
    print(f"  Fixed costs:     {_money(overview.monthly_fixed, currency)}")
    print(
        f"  Investment goal: "
        f"{_money(overview.investment_goal_value, currency)}"
    )
    print(f"  Available today: {_money(overview.available_today, currency)}")
    if overview.is_superfluous_high:
        print(
            f"  Warning: superfluous spending at "
            f"{overview.superfluous_percentage:.1f}%"
        )

    for summary in GetInvoicesUseCase(logger=logger).summarize(snapshot, today):
        print(
            f"  Card {summary.name}: invoice "
            f"{_money(summary.current_invoice_total, currency)}, "
            f"outstanding {_money(summary.outstanding, currency)}, "
            f"due {summary.due_date.isoformat()}"
        )

    series = GetNetWorthSeriesUseCase(logger=logger).execute(snapshot)
    if series:
        last = series[-1]
        print(f"  Net worth ({last.key}): {_money(last.net_worth, currency)}")


if __name__ == "__main__":  # pragma: no cover
    main()
