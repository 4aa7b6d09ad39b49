"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for ledger storage.
This allows us to:
1. Swap the JSON file for another backend later
2. Use in-memory storage for testing
3. Pass the store into every operation instead of a global file path

The interface is intentionally tiny. The ledger is always loaded and
saved as one unit; there are no per-record reads or writes.
"""

from abc import ABC, abstractmethod

from expense_tracker.models.expense import Ledger


class LedgerStorageInterface(ABC):
    """
    Abstract interface for ledger storage operations.

    Any storage implementation must implement these methods.
    """

    @abstractmethod
    def load(self) -> Ledger:
        """
        Load the whole ledger.

        Returns:
            The persisted ledger, or an empty ledger if nothing
            has been saved yet

        Raises:
            CorruptStoreError: If persisted state cannot be parsed
            StorageError: If reading fails
        """
        pass

    @abstractmethod
    def save(self, ledger: Ledger) -> None:
        """
        Overwrite persisted state with the given ledger.

        Args:
            ledger: The complete ledger to persist

        Raises:
            StorageError: If the write fails
        """
        pass
