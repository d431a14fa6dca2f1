"""Use case to list transactions for the statement view."""

from axis_finance.domain.models import (
    FinanceSnapshot,
    StatementFilters,
    StatementGroup,
)
from axis_finance.domain.services.statement import (
    filter_transactions,
    group_by_month,
)
from axis_finance.infrastructure.logging.logger import get_app_logger


class GetStatementUseCase:
    """Filter transactions and group them by month, newest first."""

    def __init__(self, logger=None) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()

    def execute(
        self,
        snapshot: FinanceSnapshot,
        filters: StatementFilters | None = None,
    ) -> list[StatementGroup]:
        filters = filters or StatementFilters()
        selected = filter_transactions(
            snapshot.transactions,
            snapshot.categories,
            filters,
        )
        groups = group_by_month(selected)
        self._logger.info(
            f"Statement: {len(selected)} transactions in {len(groups)} months"
        )
        return groups


__all__ = ["GetStatementUseCase"]
