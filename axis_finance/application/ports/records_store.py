"""Port for persisting finance records.

The store is an external collaborator. It accepts and returns plain
dictionaries keyed by the entity's field names; mapping to domain entities
is done by the caller.
"""

from contextlib import AbstractContextManager
from enum import Enum
from typing import Any, Protocol


class EntityKind(str, Enum):
    """Kinds of persisted records."""

    ACCOUNT = "account"
    CATEGORY = "category"
    CARD = "card"
    TRANSACTION = "transaction"


class PersistenceError(RuntimeError):
    """Raised when the records store fails to read or write."""


class RecordsStorePort(Protocol):
    """Port exposing generic CRUD access to finance records."""

    def insert(self, kind: EntityKind, record: dict[str, Any]) -> dict[str, Any]:
        """Persist a new record and return it with its id and timestamps."""

    def update(
        self,
        kind: EntityKind,
        record_id: str,
        changes: dict[str, Any],
    ) -> None:
        """Apply a partial update to an existing record."""

    def delete(self, kind: EntityKind, record_id: str) -> None:
        """Remove a record."""

    def query(self, kind: EntityKind) -> list[dict[str, Any]]:
        """Return every record of a kind."""

    def atomic(self) -> AbstractContextManager[None]:
        """Group the writes made inside the block into one unit.

        Either every write made inside the block is kept, or, when the block
        raises, none of them is. Nested blocks join the outer unit.
        """


__all__ = ["EntityKind", "PersistenceError", "RecordsStorePort"]
