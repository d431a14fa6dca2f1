"""Records store backed by SQLAlchemy.

Each entity kind lives in its own table. Column names match the entity
field names, so store records round-trip through the application mappers
without renaming.
"""

from contextlib import contextmanager
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Iterator
from uuid import uuid4

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from axis_finance.application.ports.database import DatabaseEnginePort
from axis_finance.application.ports.records_store import (
    EntityKind,
    PersistenceError,
    RecordsStorePort,
)
from axis_finance.infrastructure.logging.logger import get_app_logger

TABLES = {
    EntityKind.ACCOUNT: "accounts",
    EntityKind.CATEGORY: "categories",
    EntityKind.CARD: "credit_cards",
    EntityKind.TRANSACTION: "transactions",
}

COLUMNS = {
    EntityKind.ACCOUNT: (
        "id",
        "name",
        "account_type",
        "current_balance",
        "include_in_total",
        "created_at",
        "updated_at",
    ),
    EntityKind.CATEGORY: (
        "id",
        "name",
        "category_type",
        "icon",
        "color",
        "logic_tag",
        "monthly_budget",
        "created_at",
    ),
    EntityKind.CARD: (
        "id",
        "name",
        "closing_day",
        "due_day",
        "total_limit",
        "created_at",
    ),
    EntityKind.TRANSACTION: (
        "id",
        "amount",
        "description",
        "date",
        "status",
        "account_id",
        "card_id",
        "category_id",
        "is_recurring",
        "is_transfer",
        "transfer_to_account_id",
        "parent_transaction_id",
        "installment_number",
        "total_installments",
        "invoice_card_id",
        "invoice_month",
        "invoice_year",
        "created_at",
    ),
}

CREATE_ACCOUNTS_SQL = """
CREATE TABLE IF NOT EXISTS accounts (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    account_type TEXT NOT NULL,
    current_balance NUMERIC(14, 2) NOT NULL DEFAULT 0,
    include_in_total BOOLEAN NOT NULL DEFAULT TRUE,
    created_at TIMESTAMP WITH TIME ZONE,
    updated_at TIMESTAMP WITH TIME ZONE
)
"""

CREATE_CATEGORIES_SQL = """
CREATE TABLE IF NOT EXISTS categories (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    category_type TEXT NOT NULL,
    icon TEXT,
    color TEXT,
    logic_tag TEXT,
    monthly_budget NUMERIC(14, 2),
    created_at TIMESTAMP WITH TIME ZONE
)
"""

CREATE_CREDIT_CARDS_SQL = """
CREATE TABLE IF NOT EXISTS credit_cards (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    closing_day INTEGER NOT NULL,
    due_day INTEGER NOT NULL,
    total_limit NUMERIC(14, 2) NOT NULL DEFAULT 0,
    created_at TIMESTAMP WITH TIME ZONE
)
"""

CREATE_TRANSACTIONS_SQL = """
CREATE TABLE IF NOT EXISTS transactions (
    id TEXT PRIMARY KEY,
    amount NUMERIC(14, 2) NOT NULL,
    description TEXT NOT NULL,
    "date" DATE NOT NULL,
    status TEXT NOT NULL,
    account_id TEXT,
    card_id TEXT,
    category_id TEXT,
    is_recurring BOOLEAN NOT NULL DEFAULT FALSE,
    is_transfer BOOLEAN NOT NULL DEFAULT FALSE,
    transfer_to_account_id TEXT,
    parent_transaction_id TEXT,
    installment_number INTEGER,
    total_installments INTEGER,
    invoice_card_id TEXT,
    invoice_month INTEGER,
    invoice_year INTEGER,
    created_at TIMESTAMP WITH TIME ZONE
)
"""

SCHEMA_SQL = (
    CREATE_ACCOUNTS_SQL,
    CREATE_CATEGORIES_SQL,
    CREATE_CREDIT_CARDS_SQL,
    CREATE_TRANSACTIONS_SQL,
)


def _quote(column: str) -> str:
    return f'"{column}"'


def _to_db(value):
    """Convert a record value to a driver-friendly parameter."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


class SqlAlchemyRecordsStore(RecordsStorePort):
    """RecordsStorePort implementation using plain SQL statements."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the finance engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()
        self._conn = None

    def prepare_schema(self) -> None:
        """Create the finance tables when they do not exist."""
        try:
            with self._db_port.get_engine().begin() as conn:
                for statement in SCHEMA_SQL:
                    conn.exec_driver_sql(statement)
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Could not create schema: {exc}") from exc

    @contextmanager
    def atomic(self) -> Iterator[None]:
        """Run the enclosed writes in a single database transaction.

        Nested calls join the outer transaction. Any exception rolls back
        every write made inside the outermost block.

        Raises:
            PersistenceError: If the database fails to begin or commit.
        """
        if self._conn is not None:
            yield
            return
        try:
            with self._db_port.get_engine().begin() as conn:
                self._conn = conn
                try:
                    yield
                finally:
                    self._conn = None
        except SQLAlchemyError as exc:
            self._logger.error(f"Atomic block rolled back: {exc}")
            raise PersistenceError(f"Could not commit changes: {exc}") from exc

    def insert(self, kind: EntityKind, record: dict[str, Any]) -> dict[str, Any]:
        """Insert a record, assigning its id and creation timestamp.

        Args:
            kind: Kind of record.
            record: Values keyed by column name.

        Returns:
            dict[str, Any]: The record as stored, including ``id`` and
            ``created_at``.

        Raises:
            PersistenceError: If the database rejects the insert.
        """
        kind = EntityKind(kind)
        stored = self._columns_only(kind, record)
        stored["id"] = str(uuid4())
        stored["created_at"] = datetime.now(timezone.utc)
        columns = list(stored)
        statement = text(
            f"INSERT INTO {TABLES[kind]} "
            f"({', '.join(_quote(c) for c in columns)}) "
            f"VALUES ({', '.join(':' + c for c in columns)})"
        )
        params = {name: _to_db(value) for name, value in stored.items()}
        self._run(statement, params, f"insert {kind.value}")
        return stored

    def update(
        self,
        kind: EntityKind,
        record_id: str,
        changes: dict[str, Any],
    ) -> None:
        """Apply changes to one record.

        Raises:
            PersistenceError: If the record does not exist or the update
                fails.
        """
        kind = EntityKind(kind)
        values = self._columns_only(kind, changes)
        values.pop("id", None)
        values.pop("created_at", None)
        if not values:
            return
        assignments = ", ".join(f"{_quote(c)} = :{c}" for c in values)
        statement = text(
            f"UPDATE {TABLES[kind]} SET {assignments} WHERE id = :record_id"
        )
        params = {name: _to_db(value) for name, value in values.items()}
        params["record_id"] = record_id
        rowcount = self._run(statement, params, f"update {kind.value}")
        if rowcount == 0:
            raise PersistenceError(f"No {kind.value} with id {record_id}")

    def delete(self, kind: EntityKind, record_id: str) -> None:
        """Delete one record. Missing records are logged and ignored."""
        kind = EntityKind(kind)
        statement = text(f"DELETE FROM {TABLES[kind]} WHERE id = :record_id")
        rowcount = self._run(
            statement,
            {"record_id": record_id},
            f"delete {kind.value}",
        )
        if rowcount == 0:
            self._logger.warning(
                f"Delete of {kind.value} {record_id} matched no rows"
            )

    def query(self, kind: EntityKind) -> list[dict[str, Any]]:
        """Return every record of a kind, oldest first."""
        kind = EntityKind(kind)
        columns = ", ".join(_quote(c) for c in COLUMNS[kind])
        statement = text(
            f"SELECT {columns} FROM {TABLES[kind]} ORDER BY created_at, id"
        )
        try:
            if self._conn is not None:
                rows = self._conn.execute(statement).all()
            else:
                with self._db_port.get_engine().connect() as conn:
                    rows = conn.execute(statement).all()
        except SQLAlchemyError as exc:
            raise PersistenceError(
                f"Could not read {kind.value} records: {exc}"
            ) from exc
        return [dict(row._mapping) for row in rows]

    def _run(self, statement, params: dict[str, Any], action: str) -> int:
        try:
            if self._conn is not None:
                return self._conn.execute(statement, params).rowcount
            with self._db_port.get_engine().begin() as conn:
                rowcount = conn.execute(statement, params).rowcount
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Could not {action}: {exc}") from exc
        return rowcount

    @staticmethod
    def _columns_only(kind: EntityKind, record: dict[str, Any]) -> dict:
        unknown = set(record) - set(COLUMNS[kind])
        if unknown:
            raise ValueError(
                f"Unknown {kind.value} columns: {sorted(unknown)}"
            )
        return dict(record)


__all__ = [
    "TABLES",
    "COLUMNS",
    "SCHEMA_SQL",
    "SqlAlchemyRecordsStore",
]
