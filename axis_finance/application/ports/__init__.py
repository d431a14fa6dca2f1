"""Application ports package."""

from .database import DatabaseEnginePort
from .records_store import EntityKind, PersistenceError, RecordsStorePort

__all__ = [
    "DatabaseEnginePort",
    "EntityKind",
    "PersistenceError",
    "RecordsStorePort",
]
