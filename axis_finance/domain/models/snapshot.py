"""Immutable bundle of the four finance collections."""

from dataclasses import dataclass, replace

from axis_finance.domain.errors import RecordNotFoundError

from .entities import Account, Category, CreditCard, Transaction


def _replace_by_id(items: tuple, item) -> tuple:
    if any(existing.id == item.id for existing in items):
        return tuple(
            item if existing.id == item.id else existing for existing in items
        )
    return items + (item,)


@dataclass(frozen=True)
class FinanceSnapshot:
    """Point-in-time view of accounts, categories, cards and transactions.

    Mutating operations return a new snapshot and leave this one untouched.
    """

    accounts: tuple[Account, ...] = ()
    categories: tuple[Category, ...] = ()
    cards: tuple[CreditCard, ...] = ()
    transactions: tuple[Transaction, ...] = ()

    def __post_init__(self) -> None:
        for name in ("accounts", "categories", "cards", "transactions"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    def find_account(self, account_id: str | None) -> Account | None:
        return next((a for a in self.accounts if a.id == account_id), None)

    def find_category(self, category_id: str | None) -> Category | None:
        return next((c for c in self.categories if c.id == category_id), None)

    def find_card(self, card_id: str | None) -> CreditCard | None:
        return next((c for c in self.cards if c.id == card_id), None)

    def find_transaction(self, transaction_id: str | None) -> Transaction | None:
        return next(
            (t for t in self.transactions if t.id == transaction_id),
            None,
        )

    def get_account(self, account_id: str) -> Account:
        """Return an account or raise RecordNotFoundError."""
        account = self.find_account(account_id)
        if account is None:
            raise RecordNotFoundError(f"Unknown account: {account_id}")
        return account

    def get_card(self, card_id: str) -> CreditCard:
        """Return a card or raise RecordNotFoundError."""
        card = self.find_card(card_id)
        if card is None:
            raise RecordNotFoundError(f"Unknown credit card: {card_id}")
        return card

    def get_transaction(self, transaction_id: str) -> Transaction:
        """Return a transaction or raise RecordNotFoundError."""
        transaction = self.find_transaction(transaction_id)
        if transaction is None:
            raise RecordNotFoundError(f"Unknown transaction: {transaction_id}")
        return transaction

    def with_account(self, account: Account) -> "FinanceSnapshot":
        return replace(self, accounts=_replace_by_id(self.accounts, account))

    def with_category(self, category: Category) -> "FinanceSnapshot":
        return replace(
            self,
            categories=_replace_by_id(self.categories, category),
        )

    def with_card(self, card: CreditCard) -> "FinanceSnapshot":
        return replace(self, cards=_replace_by_id(self.cards, card))

    def with_transaction(self, transaction: Transaction) -> "FinanceSnapshot":
        return replace(
            self,
            transactions=_replace_by_id(self.transactions, transaction),
        )

    def without(self, kind: str, record_id: str) -> "FinanceSnapshot":
        """Return a snapshot with the record of ``kind`` removed.

        Args:
            kind: One of accounts, categories, cards or transactions.
            record_id: Identifier of the record to drop.
        """
        if kind not in ("accounts", "categories", "cards", "transactions"):
            raise ValueError(f"Unknown collection: {kind}")
        remaining = tuple(
            item for item in getattr(self, kind) if item.id != record_id
        )
        return replace(self, **{kind: remaining})


__all__ = ["FinanceSnapshot"]
