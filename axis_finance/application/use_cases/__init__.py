"""Application use cases package."""

from .add_transaction import AddTransactionUseCase
from .create_installment_chain import (
    CreateInstallmentChainUseCase,
    InstallmentChainResult,
)
from .get_budget_overview import (
    GetBudgetOverviewUseCase,
    GetNetWorthSeriesUseCase,
)
from .get_invoices import GetInvoicesUseCase
from .get_statement import GetStatementUseCase
from .load_snapshot import LoadSnapshotUseCase
from .manage_records import (
    ManageAccountsUseCase,
    ManageCardsUseCase,
    ManageCategoriesUseCase,
)
from .pay_invoice import PayInvoiceUseCase
from .results import MutationResult
from .update_transaction import (
    DeleteTransactionUseCase,
    UpdateTransactionUseCase,
)

__all__ = [
    "AddTransactionUseCase",
    "CreateInstallmentChainUseCase",
    "InstallmentChainResult",
    "GetBudgetOverviewUseCase",
    "GetNetWorthSeriesUseCase",
    "GetInvoicesUseCase",
    "GetStatementUseCase",
    "LoadSnapshotUseCase",
    "ManageAccountsUseCase",
    "ManageCardsUseCase",
    "ManageCategoriesUseCase",
    "PayInvoiceUseCase",
    "MutationResult",
    "DeleteTransactionUseCase",
    "UpdateTransactionUseCase",
]
