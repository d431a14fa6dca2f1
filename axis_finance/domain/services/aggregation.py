"""Domain services for monthly budget aggregates.

Every monthly figure is computed over the same population: transactions
dated in the requested month that are paid and are not transfers. A
transaction whose category cannot be resolved belongs to no typed bucket.
"""

from collections.abc import Iterable
from decimal import Decimal

from axis_finance.domain.constants import CategoryType, LogicTag
from axis_finance.domain.models import (
    Account,
    Category,
    CategoryBudgetUsage,
    LogicTagBreakdown,
    Transaction,
)

ZERO = Decimal("0")


def index_categories(categories: Iterable[Category]) -> dict[str, Category]:
    """Return categories keyed by id."""
    return {category.id: category for category in categories if category.id}


def is_countable(transaction: Transaction, month: int, year: int) -> bool:
    """Return True when a transaction counts toward the month's figures.

    Args:
        transaction: Transaction to evaluate.
        month: Month (1-12).
        year: Calendar year.
    """
    return (
        transaction.date.month == month
        and transaction.date.year == year
        and transaction.is_paid
        and not transaction.is_transfer
    )


def countable_transactions(
    transactions: Iterable[Transaction],
    month: int,
    year: int,
) -> list[Transaction]:
    return [txn for txn in transactions if is_countable(txn, month, year)]


def _sum_amounts(transactions: Iterable[Transaction]) -> Decimal:
    return sum((txn.amount for txn in transactions), ZERO)


def _of_type(
    transactions: Iterable[Transaction],
    index: dict[str, Category],
    category_type: CategoryType,
) -> list[Transaction]:
    selected = []
    for txn in transactions:
        category = index.get(txn.category_id)
        if category is not None and category.category_type is category_type:
            selected.append(txn)
    return selected


def total_balance(accounts: Iterable[Account]) -> Decimal:
    """Sum the balances of accounts flagged for inclusion in the total."""
    return sum(
        (account.current_balance for account in accounts if account.include_in_total),
        ZERO,
    )


def monthly_income(
    transactions: Iterable[Transaction],
    categories: Iterable[Category],
    month: int,
    year: int,
) -> Decimal:
    """Sum paid income of the month."""
    index = index_categories(categories)
    countable = countable_transactions(transactions, month, year)
    return _sum_amounts(_of_type(countable, index, CategoryType.INCOME))


def monthly_expenses(
    transactions: Iterable[Transaction],
    categories: Iterable[Category],
    month: int,
    year: int,
) -> Decimal:
    """Sum paid expenses of the month."""
    index = index_categories(categories)
    countable = countable_transactions(transactions, month, year)
    return _sum_amounts(_of_type(countable, index, CategoryType.EXPENSE))


def monthly_fixed_expenses(
    transactions: Iterable[Transaction],
    categories: Iterable[Category],
    month: int,
    year: int,
    *,
    strict: bool = True,
) -> Decimal:
    """Sum paid recurring costs of the month.

    Args:
        transactions: Transactions to aggregate.
        categories: Categories used to resolve the transaction type.
        month: Month (1-12).
        year: Calendar year.
        strict: Only count recurring transactions of expense categories.
            With ``strict=False`` every recurring transaction counts,
            whatever its category.

    Returns:
        Decimal: Total of the recurring transactions.
    """
    countable = [
        txn
        for txn in countable_transactions(transactions, month, year)
        if txn.is_recurring
    ]
    if strict:
        countable = _of_type(
            countable,
            index_categories(categories),
            CategoryType.EXPENSE,
        )
    return _sum_amounts(countable)


def expenses_by_logic_tag(
    transactions: Iterable[Transaction],
    categories: Iterable[Category],
    month: int,
    year: int,
) -> LogicTagBreakdown:
    """Split the month's paid expenses by category logic tag.

    Expenses of untagged categories are left out of all three buckets.
    """
    index = index_categories(categories)
    expenses = _of_type(
        countable_transactions(transactions, month, year),
        index,
        CategoryType.EXPENSE,
    )
    totals = {tag: ZERO for tag in LogicTag}
    for txn in expenses:
        tag = index[txn.category_id].logic_tag
        if tag in totals:
            totals[tag] += txn.amount
    return LogicTagBreakdown(
        essential=totals[LogicTag.ESSENTIAL],
        superfluous=totals[LogicTag.SUPERFLUOUS],
        investment=totals[LogicTag.INVESTMENT],
    )


def signed_amount(
    transaction: Transaction,
    categories: Iterable[Category],
) -> Decimal:
    """Return the balance effect of a non-transfer transaction.

    Income is positive, expense negative. An unresolved category has no
    effect.
    """
    category = index_categories(categories).get(transaction.category_id)
    if category is None:
        return ZERO
    if category.category_type is CategoryType.INCOME:
        return transaction.amount
    return -transaction.amount


def unresolved_category_ids(
    transactions: Iterable[Transaction],
    categories: Iterable[Category],
) -> set[str]:
    """Return category ids referenced by transactions but not loaded."""
    index = index_categories(categories)
    return {
        txn.category_id
        for txn in transactions
        if txn.category_id and txn.category_id not in index
    }


def category_budget_usage(
    transactions: Iterable[Transaction],
    categories: Iterable[Category],
    month: int,
    year: int,
) -> list[CategoryBudgetUsage]:
    """Compare each budgeted expense category with the month's spending."""
    budgeted = [
        category
        for category in categories
        if category.is_expense and category.monthly_budget is not None
    ]
    spent: dict[str, Decimal] = {}
    for txn in countable_transactions(transactions, month, year):
        if txn.category_id:
            spent[txn.category_id] = spent.get(txn.category_id, ZERO) + txn.amount
    return [
        CategoryBudgetUsage(
            category_id=category.id,
            name=category.name,
            budget=category.monthly_budget,
            spent=spent.get(category.id, ZERO),
        )
        for category in budgeted
    ]


__all__ = [
    "index_categories",
    "is_countable",
    "countable_transactions",
    "total_balance",
    "monthly_income",
    "monthly_expenses",
    "monthly_fixed_expenses",
    "expenses_by_logic_tag",
    "signed_amount",
    "unresolved_category_ids",
    "category_budget_usage",
]
