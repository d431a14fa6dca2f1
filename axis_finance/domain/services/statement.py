"""Filtering and grouping for the transaction statement."""

from collections.abc import Iterable

from axis_finance.domain.constants import CategoryType
from axis_finance.domain.models import (
    Category,
    StatementFilters,
    StatementGroup,
    Transaction,
)
from axis_finance.domain.services.aggregation import index_categories

STATEMENT_KINDS = ("all", "income", "expense", "transfer")


def _matches_kind(
    transaction: Transaction,
    kind: str,
    index: dict[str, Category],
) -> bool:
    if kind == "all":
        return True
    if kind == "transfer":
        return transaction.is_transfer
    category = index.get(transaction.category_id)
    if category is None:
        return False
    if kind == "income":
        return category.category_type is CategoryType.INCOME
    return category.category_type is CategoryType.EXPENSE


def filter_transactions(
    transactions: Iterable[Transaction],
    categories: Iterable[Category],
    filters: StatementFilters,
) -> list[Transaction]:
    """Apply statement filters and sort newest first.

    Args:
        transactions: Transactions to filter.
        categories: Categories used by the kind filter.
        filters: Search term, kind, account or card id and category id.

    Returns:
        list[Transaction]: Matching transactions, most recent first.

    Raises:
        ValueError: If the kind is not one of STATEMENT_KINDS.
    """
    if filters.kind not in STATEMENT_KINDS:
        raise ValueError(f"Unknown statement kind: {filters.kind}")
    index = index_categories(categories)
    search = filters.search.strip().lower()
    selected = []
    for txn in transactions:
        if search and search not in txn.description.lower():
            continue
        if not _matches_kind(txn, filters.kind, index):
            continue
        if filters.source_id and filters.source_id not in (
            txn.account_id,
            txn.card_id,
        ):
            continue
        if filters.category_id and txn.category_id != filters.category_id:
            continue
        selected.append(txn)
    return sorted(selected, key=lambda txn: txn.date, reverse=True)


def group_by_month(transactions: Iterable[Transaction]) -> list[StatementGroup]:
    """Group transactions by ``YYYY-MM``, keeping their order."""
    groups: dict[str, StatementGroup] = {}
    for txn in transactions:
        group = groups.setdefault(txn.month_key, StatementGroup(key=txn.month_key))
        group.transactions.append(txn)
    return list(groups.values())


__all__ = ["STATEMENT_KINDS", "filter_transactions", "group_by_month"]
