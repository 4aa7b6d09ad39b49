"""
Storage Services Package

Provides the abstract ledger storage interface and its implementations.
The JSON file backend is the default; the in-memory backend is for tests.
"""

from expense_tracker.exceptions import CorruptStoreError, StorageError
from expense_tracker.services.storage.interface import LedgerStorageInterface
from expense_tracker.services.storage.json_file import JsonFileLedgerStorage
from expense_tracker.services.storage.memory import InMemoryLedgerStorage

__all__ = [
    # Interfaces
    "LedgerStorageInterface",
    # Exceptions
    "CorruptStoreError",
    "StorageError",
    # Implementations
    "InMemoryLedgerStorage",
    "JsonFileLedgerStorage",
]
