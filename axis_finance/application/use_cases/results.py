"""Result records shared by mutating use cases."""

from dataclasses import dataclass
from typing import Any

from axis_finance.domain.models import FinanceSnapshot


@dataclass(frozen=True)
class MutationResult:
    """Outcome of a write.

    Attributes:
        record: Entity as persisted by the store.
        snapshot: Snapshot reflecting the write and its side effects.
    """

    record: Any
    snapshot: FinanceSnapshot


__all__ = ["MutationResult"]
