"""
Services Package

Contains the collaborators the ledger core calls into:
- Storage: whole-ledger load/save (JSON file, in-memory)
- Export: CSV writer
"""

from expense_tracker.services.export import EXPORT_COLUMNS, export_expenses_csv
from expense_tracker.services.storage import (
    CorruptStoreError,
    InMemoryLedgerStorage,
    JsonFileLedgerStorage,
    LedgerStorageInterface,
    StorageError,
)

__all__ = [
    # Export
    "EXPORT_COLUMNS",
    "export_expenses_csv",
    # Storage
    "CorruptStoreError",
    "InMemoryLedgerStorage",
    "JsonFileLedgerStorage",
    "LedgerStorageInterface",
    "StorageError",
]
